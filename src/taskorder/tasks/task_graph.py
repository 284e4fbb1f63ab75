# src/taskorder/tasks/task_graph.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from .task_errors import DuplicateNameError, ParseError
from .task_models import AddTaskResult, Task

logger = logging.getLogger(__name__)


class TaskRegistry:
    """
    Canonical set of tasks plus the dependency indices derived from it.

    Indices:
    - _unresolved[name]: how many dependencies `name` waits on
    - _dependents[name]: tasks that list `name` as a dependency (reverse edges)

    Tasks and indices are one resource: they are cleared/rebuilt together and every
    public method holds `lock` (re-entrant, so the scheduler can hold it for a whole
    pass while calling read helpers).
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._tasks: dict[str, Task] = {}
        self._unresolved: dict[str, int] = {}
        self._dependents: dict[str, list[str]] = {}

    # ---- mutation ----

    def add_task(
        self,
        name: str,
        priority: int,
        deadline: int,
        dependencies: Iterable[str] = (),
    ) -> AddTaskResult:
        """
        Add one task.

        - duplicate name -> DuplicateNameError, nothing is touched
        - unknown dependency names are skipped and reported in the result
        - priority and deadline must be ints (bool is refused), nothing is coerced
        """
        for field, value in (("priority", priority), ("deadline", deadline)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"{field} of task {name!r} must be an int, got {type(value).__name__}"
                )

        with self.lock:
            if name in self._tasks:
                raise DuplicateNameError(name)

            retained: list[str] = []
            skipped: list[str] = []
            for dep in dependencies:
                if dep in retained or dep in skipped:
                    continue
                if dep not in self._tasks:
                    logger.warning("Dependency %r of task %r not found; skipping", dep, name)
                    skipped.append(dep)
                    continue
                retained.append(dep)

            task = Task(
                name=name,
                priority=priority,
                deadline=deadline,
                dependencies=tuple(retained),
            )
            self._insert(task)
            logger.debug(
                "Task added name=%s priority=%s deadline=%s deps=%s",
                name,
                task.priority,
                task.deadline,
                list(task.dependencies),
            )
            return AddTaskResult(task=task, skipped_dependencies=skipped)

    def bulk_load(self, tasks: Iterable[Task]) -> None:
        """
        Replace the whole registry with `tasks`.

        The batch is trusted: dependency names are not checked against the batch.
        A name that never shows up leaves its dependent with an inflated count
        (see missing_dependencies()).
        """
        batch = list(tasks)
        seen: set[str] = set()
        for idx, task in enumerate(batch):
            if task.name in seen:
                raise ParseError(f"duplicate task name {task.name!r}", index=idx)
            seen.add(task.name)

        with self.lock:
            self.clear()
            for task in batch:
                self._insert(task)
            logger.info("Bulk-loaded %d task(s)", len(batch))

    def clear(self) -> None:
        with self.lock:
            self._tasks.clear()
            self._unresolved.clear()
            self._dependents.clear()

    def _insert(self, task: Task) -> None:
        self._tasks[task.name] = task
        self._unresolved.setdefault(task.name, 0)
        for dep in task.dependencies:
            self._dependents.setdefault(dep, []).append(task.name)
            self._unresolved[task.name] += 1

    # ---- read API ----

    def list_tasks(self) -> list[Task]:
        """All tasks ordered by name."""
        with self.lock:
            return [self._tasks[name] for name in sorted(self._tasks)]

    def names(self) -> list[str]:
        with self.lock:
            return sorted(self._tasks)

    def get(self, name: str) -> Task | None:
        with self.lock:
            return self._tasks.get(name)

    def dependents_of(self, name: str) -> list[str]:
        with self.lock:
            return list(self._dependents.get(name, ()))

    def unresolved_count(self, name: str) -> int:
        with self.lock:
            return self._unresolved.get(name, 0)

    def unresolved_counts(self) -> dict[str, int]:
        """Copy of the per-task unresolved counts (safe to mutate)."""
        with self.lock:
            return {name: self._unresolved.get(name, 0) for name in self._tasks}

    def snapshot(self) -> tuple[dict[str, int], dict[str, list[str]]]:
        """Deep copy of both dependency indices, as stored."""
        with self.lock:
            return (
                dict(self._unresolved),
                {name: list(deps) for name, deps in self._dependents.items()},
            )

    def missing_dependencies(self) -> dict[str, list[str]]:
        """Tasks whose dependency lists mention names that are not registered."""
        with self.lock:
            out: dict[str, list[str]] = {}
            for name in sorted(self._tasks):
                missing = [d for d in self._tasks[name].dependencies if d not in self._tasks]
                if missing:
                    out[name] = missing
            return out

    def __contains__(self, name: object) -> bool:
        with self.lock:
            return name in self._tasks

    def __len__(self) -> int:
        with self.lock:
            return len(self._tasks)
