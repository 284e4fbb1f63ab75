# src/taskorder/tasks/task_errors.py

from __future__ import annotations

from collections.abc import Iterable


class TaskOrderError(Exception):
    """Base class for every refusal reported by the task core."""


class DuplicateNameError(TaskOrderError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Task name already exists: {name!r}")


class ParseError(TaskOrderError):
    """Malformed task payload (invalid JSON or a record outside the schema)."""

    def __init__(self, detail: str, *, index: int | None = None) -> None:
        self.detail = detail
        self.index = index
        where = f" (record #{index})" if index is not None else ""
        super().__init__(f"Invalid task payload{where}: {detail}")


class CyclicDependencyError(TaskOrderError):
    def __init__(self, cycle: Iterable[str]) -> None:
        self.cycle = list(cycle)
        super().__init__(
            "Circular dependency detected: " + " -> ".join(self.cycle)
        )


class UnschedulableRemainderError(TaskOrderError):
    """
    Scheduling stopped before emitting every task.

    Either a cycle slipped past the pre-check or a bulk-loaded task depends on
    a name that was never defined in the batch.
    """

    def __init__(self, stuck: Iterable[str], message: str | None = None) -> None:
        self.stuck = list(stuck)
        super().__init__(
            message
            or f"{len(self.stuck)} task(s) could not be scheduled: {', '.join(self.stuck)}"
        )


class NoExecutableTasksError(UnschedulableRemainderError):
    """Non-empty registry where every task waits on another one (nothing to start with)."""

    def __init__(self, names: Iterable[str]) -> None:
        names = list(names)
        super().__init__(
            names,
            f"No executable tasks found: all {len(names)} task(s) have "
            f"unresolved dependencies ({', '.join(names)})",
        )

    @property
    def names(self) -> list[str]:
        return self.stuck
