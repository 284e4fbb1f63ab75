# tests/test_task_graph.py

from __future__ import annotations

import pytest

from taskorder.tasks.task_errors import DuplicateNameError, ParseError
from taskorder.tasks.task_graph import TaskRegistry
from taskorder.tasks.task_models import Task


def test_add_task_updates_counts_and_dependents(registry: TaskRegistry) -> None:
    registry.add_task("fetch", 1, 10)
    registry.add_task("parse", 2, 10, ["fetch"])
    registry.add_task("report", 3, 20, ["fetch", "parse"])

    assert registry.unresolved_count("fetch") == 0
    assert registry.unresolved_count("parse") == 1
    assert registry.unresolved_count("report") == 2
    assert registry.dependents_of("fetch") == ["parse", "report"]
    assert registry.dependents_of("parse") == ["report"]
    assert registry.dependents_of("report") == []


def test_dependents_and_dependencies_are_inverse(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 1)
    registry.add_task("b", 1, 1, ["a"])
    registry.add_task("c", 1, 1, ["a", "b"])

    for task in registry.list_tasks():
        for dep in task.dependencies:
            assert task.name in registry.dependents_of(dep)
    for name in registry.names():
        for dependent in registry.dependents_of(name):
            assert name in registry.get(dependent).dependencies


def test_unknown_dependency_is_skipped_with_advisory(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 1)
    result = registry.add_task("b", 1, 1, ["a", "ghost"])

    assert result.skipped_dependencies == ["ghost"]
    assert result.warnings == ["Dependency 'ghost' not found. Skipping."]
    assert result.task.dependencies == ("a",)
    assert registry.unresolved_count("b") == 1
    assert registry.dependents_of("ghost") == []


def test_repeated_dependency_counts_once(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 1)
    result = registry.add_task("b", 1, 1, ["a", "a"])

    assert result.task.dependencies == ("a",)
    assert registry.unresolved_count("b") == 1
    assert registry.dependents_of("a") == ["b"]


def test_duplicate_name_leaves_registry_unchanged(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 1)
    registry.add_task("b", 2, 2, ["a"])
    before_tasks = registry.list_tasks()
    before_graph = registry.snapshot()

    with pytest.raises(DuplicateNameError) as exc:
        registry.add_task("b", 9, 9, ["a"])

    assert exc.value.name == "b"
    assert registry.list_tasks() == before_tasks
    assert registry.snapshot() == before_graph


def test_list_tasks_is_sorted_and_idempotent(registry: TaskRegistry) -> None:
    for name in ("zeta", "alpha", "mid"):
        registry.add_task(name, 1, 1)

    first = registry.list_tasks()
    second = registry.list_tasks()

    assert [t.name for t in first] == ["alpha", "mid", "zeta"]
    assert first == second


def test_bulk_load_replaces_everything(registry: TaskRegistry) -> None:
    registry.add_task("old", 1, 1)

    registry.bulk_load(
        [
            Task("x", 1, 1, ()),
            Task("y", 1, 1, ("x",)),
        ]
    )

    assert registry.names() == ["x", "y"]
    assert "old" not in registry
    assert registry.unresolved_count("y") == 1
    assert registry.dependents_of("x") == ["y"]


def test_bulk_load_trusts_batch_and_reports_missing(registry: TaskRegistry) -> None:
    registry.bulk_load([Task("y", 1, 1, ("never_defined",))])

    assert registry.unresolved_count("y") == 1
    assert registry.missing_dependencies() == {"y": ["never_defined"]}


def test_bulk_load_rejects_duplicate_names_without_clearing(registry: TaskRegistry) -> None:
    registry.add_task("keep", 1, 1)

    with pytest.raises(ParseError):
        registry.bulk_load([Task("x", 1, 1), Task("x", 2, 2)])

    assert registry.names() == ["keep"]


def test_missing_keys_read_as_empty(registry: TaskRegistry) -> None:
    assert registry.dependents_of("nobody") == []
    assert registry.unresolved_count("nobody") == 0
    assert registry.get("nobody") is None
    assert len(registry) == 0


@pytest.mark.parametrize(("priority", "deadline"), [(1.9, 1), (True, 1), (1, "2"), (1, None)])
def test_add_task_refuses_non_int_fields(registry: TaskRegistry, priority, deadline) -> None:
    registry.add_task("a", 1, 1)
    before = registry.snapshot()

    with pytest.raises(TypeError):
        registry.add_task("b", priority, deadline, ["a"])

    assert registry.names() == ["a"]
    assert registry.snapshot() == before
