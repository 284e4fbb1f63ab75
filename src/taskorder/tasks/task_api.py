# src/taskorder/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.state import AppState
from .task_codec import dump_tasks, parse_tasks
from .task_models import AddTaskResult, Task
from .task_scheduler import schedule

logger = logging.getLogger(__name__)


def parse_dependency_list(text: str | Iterable[str] | None) -> list[str]:
    """
    Normalize user-entered dependencies.

    Accepts "none" (case-insensitive), an empty value, a comma-separated string
    ("a, b,c") or an already split iterable. All whitespace inside a name is
    dropped and empty entries are ignored.
    """
    if text is None:
        return []
    parts = text.split(",") if isinstance(text, str) else list(text)
    if len(parts) == 1 and parts[0].strip().lower() in ("", "none"):
        return []
    out: list[str] = []
    for part in parts:
        name = "".join(part.split())
        if name:
            out.append(name)
    return out


def add_task(
    state: AppState,
    *,
    name: str,
    priority: int,
    deadline: int,
    dependencies: str | Iterable[str] | None = None,
) -> AddTaskResult:
    """Add a task from already-validated input (see parse_dependency_list)."""
    result = state.registry.add_task(
        name,
        priority,
        deadline,
        parse_dependency_list(dependencies),
    )
    logger.info(
        "Added task %s (skipped dependencies: %s)",
        name,
        result.skipped_dependencies or "none",
    )
    return result


def save_tasks(state: AppState) -> int:
    """Serialize the registry into the payload store; returns the task count."""
    tasks = state.registry.list_tasks()
    state.store.write_text(dump_tasks(tasks))
    return len(tasks)


def load_tasks(state: AppState, text: str | None = None) -> int | None:
    """
    Replace the registry from a JSON payload.

    `text` defaults to the store's content. Returns the number of tasks loaded,
    or None when the store has nothing saved. ParseError leaves the registry as it was.
    """
    if text is None:
        text = state.store.read_text()
        if text is None:
            return None

    tasks = parse_tasks(text)
    state.registry.bulk_load(tasks)

    missing = state.registry.missing_dependencies()
    if missing:
        logger.warning("Loaded tasks reference undefined dependencies: %s", missing)
    return len(tasks)


def plan_tasks(state: AppState) -> list[Task]:
    """Scheduled order as Task objects (no side effects)."""
    with state.registry.lock:
        order = schedule(state.registry)
        return [t for t in (state.registry.get(n) for n in order) if t is not None]


def execute_tasks(state: AppState) -> list[Task]:
    """Schedule, then record every task of the order in the execution log."""
    tasks = plan_tasks(state)
    state.execution_log.record(t.name for t in tasks)
    return tasks
