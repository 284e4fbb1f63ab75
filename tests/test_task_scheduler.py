# tests/test_task_scheduler.py

from __future__ import annotations

import random

import pytest

from taskorder.tasks.task_errors import (
    CyclicDependencyError,
    NoExecutableTasksError,
    UnschedulableRemainderError,
)
from taskorder.tasks.task_graph import TaskRegistry
from taskorder.tasks.task_models import Task
from taskorder.tasks.task_scheduler import schedule


def _assert_topological(registry: TaskRegistry, order: list[str]) -> None:
    position = {name: i for i, name in enumerate(order)}
    for task in registry.list_tasks():
        for dep in task.dependencies:
            assert position[dep] < position[task.name], f"{dep} must precede {task.name}"


def test_deadline_then_priority_tie_break(registry: TaskRegistry) -> None:
    registry.add_task("A", 1, 5)
    registry.add_task("B", 9, 5)
    registry.add_task("C", 1, 3)

    assert schedule(registry) == ["C", "B", "A"]


def test_full_tie_breaks_by_name(registry: TaskRegistry) -> None:
    for name in ("delta", "alpha", "charlie", "bravo"):
        registry.add_task(name, 4, 4)

    assert schedule(registry) == ["alpha", "bravo", "charlie", "delta"]


def test_dependencies_override_deadlines(registry: TaskRegistry) -> None:
    registry.add_task("setup", 1, 100)
    registry.add_task("urgent", 1, 1, ["setup"])
    registry.add_task("other", 1, 50)

    order = schedule(registry)

    assert order == ["other", "setup", "urgent"]
    _assert_topological(registry, order)


def test_newly_ready_task_competes_with_frontier(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 10)
    registry.add_task("b", 1, 30)
    registry.add_task("after_a", 1, 20, ["a"])

    # after_a becomes ready once a is emitted and beats b on deadline.
    assert schedule(registry) == ["a", "after_a", "b"]


def test_random_dag_orders_are_topological() -> None:
    rng = random.Random(1234)
    for _ in range(20):
        registry = TaskRegistry()
        names: list[str] = []
        for i in range(40):
            name = f"t{i:02d}"
            deps = rng.sample(names, k=min(len(names), rng.randint(0, 3)))
            registry.add_task(name, rng.randint(0, 5), rng.randint(0, 5), deps)
            names.append(name)

        order = schedule(registry)

        assert sorted(order) == sorted(names)
        _assert_topological(registry, order)


def test_schedule_is_reproducible_and_does_not_mutate(registry: TaskRegistry) -> None:
    registry.add_task("a", 1, 2)
    registry.add_task("b", 3, 2, ["a"])
    registry.add_task("c", 2, 1, ["a"])
    before = registry.snapshot()

    first = schedule(registry)
    second = schedule(registry)

    assert first == second == ["a", "c", "b"]
    assert registry.snapshot() == before


def test_empty_registry_yields_empty_order(registry: TaskRegistry) -> None:
    assert schedule(registry) == []


def test_cycle_is_refused_before_scheduling(registry: TaskRegistry) -> None:
    registry.bulk_load(
        [
            Task("root", 1, 1, ()),
            Task("a", 1, 1, ("root", "b")),
            Task("b", 1, 1, ("a",)),
        ]
    )

    with pytest.raises(CyclicDependencyError) as exc:
        schedule(registry)

    assert set(exc.value.cycle) == {"a", "b"}


def test_all_blocked_without_precheck_terminates(registry: TaskRegistry) -> None:
    registry.bulk_load([Task("a", 1, 1, ("b",)), Task("b", 1, 1, ("a",))])

    with pytest.raises(UnschedulableRemainderError) as exc:
        schedule(registry, check_cycles=False)

    assert exc.value.stuck == ["a", "b"]
    assert isinstance(exc.value, NoExecutableTasksError)


def test_partial_cycle_without_precheck_reports_remainder(registry: TaskRegistry) -> None:
    registry.bulk_load(
        [
            Task("free", 1, 1, ()),
            Task("b", 1, 1, ("free", "c")),
            Task("c", 1, 1, ("b",)),
        ]
    )

    with pytest.raises(UnschedulableRemainderError) as exc:
        schedule(registry, check_cycles=False)

    assert not isinstance(exc.value, NoExecutableTasksError)
    assert exc.value.stuck == ["b", "c"]


def test_undefined_dependency_from_bulk_load_is_stuck(registry: TaskRegistry) -> None:
    registry.bulk_load([Task("a", 1, 1, ()), Task("b", 1, 1, ("missing",))])

    with pytest.raises(UnschedulableRemainderError) as exc:
        schedule(registry)

    assert exc.value.stuck == ["b"]


def test_no_zero_dependency_task(registry: TaskRegistry) -> None:
    registry.bulk_load([Task("a", 1, 1, ("ghost",))])

    with pytest.raises(NoExecutableTasksError) as exc:
        schedule(registry)

    assert exc.value.names == ["a"]
