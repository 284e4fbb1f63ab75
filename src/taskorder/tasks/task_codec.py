# src/taskorder/tasks/task_codec.py

"""
JSON wire format for tasks.

A payload is a JSON array of records:
    {"name": str, "priority": int, "deadline": int, "dependencies": [str, ...]}

Anything else is rejected with ParseError.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .task_errors import ParseError
from .task_models import Task

RECORD_KEYS = ("name", "priority", "deadline", "dependencies")


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "name": task.name,
        "priority": task.priority,
        "deadline": task.deadline,
        "dependencies": list(task.dependencies),
    }


def _is_int(value: Any) -> bool:
    # bool is a subclass of int; JSON true/false is not a valid priority.
    return isinstance(value, int) and not isinstance(value, bool)


def task_from_record(record: Any, *, index: int | None = None) -> Task:
    if not isinstance(record, dict):
        raise ParseError(f"expected an object, got {type(record).__name__}", index=index)

    missing = [k for k in RECORD_KEYS if k not in record]
    if missing:
        raise ParseError(f"missing key(s): {', '.join(missing)}", index=index)

    unknown = sorted(k for k in record if k not in RECORD_KEYS)
    if unknown:
        raise ParseError(f"unknown key(s): {', '.join(unknown)}", index=index)

    name = record["name"]
    if not isinstance(name, str):
        raise ParseError("'name' must be a string", index=index)

    for key in ("priority", "deadline"):
        if not _is_int(record[key]):
            raise ParseError(f"'{key}' of task {name!r} must be an integer", index=index)

    deps = record["dependencies"]
    if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
        raise ParseError(
            f"'dependencies' of task {name!r} must be a list of strings", index=index
        )

    return Task(
        name=name,
        priority=record["priority"],
        deadline=record["deadline"],
        dependencies=tuple(deps),
    )


def dump_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False, indent=4)


def parse_tasks(text: str) -> list[Task]:
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"not valid JSON ({e})") from e

    if not isinstance(data, list):
        raise ParseError(f"expected a JSON array of tasks, got {type(data).__name__}")

    return [task_from_record(rec, index=i) for i, rec in enumerate(data)]
