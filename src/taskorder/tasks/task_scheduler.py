# src/taskorder/tasks/task_scheduler.py

from __future__ import annotations

"""
Priority scheduler.

Kahn's topological sort where the ready set is a min-heap instead of a FIFO:
- a task becomes ready once every dependency has been emitted,
- among ready tasks the earliest deadline goes first,
- equal deadlines: higher priority first,
- equal both: smaller name first (keeps output reproducible).

The scheduler only reads the registry. Unresolved counts are copied up front
and the registry lock is held for the whole pass, so the order is computed
from one consistent snapshot.
"""

import heapq
import logging

from .cycle_detector import find_cycle
from .task_errors import (
    CyclicDependencyError,
    NoExecutableTasksError,
    UnschedulableRemainderError,
)
from .task_graph import TaskRegistry

logger = logging.getLogger(__name__)


def schedule(registry: TaskRegistry, *, check_cycles: bool = True) -> list[str]:
    """
    Compute the execution order for every registered task.

    Raises:
    - CyclicDependencyError: the graph has a cycle (checked before anything else)
    - NoExecutableTasksError: nothing is ready at the start
    - UnschedulableRemainderError: the loop stopped with tasks left over

    check_cycles=False skips the DFS pre-check; the loop still terminates and
    reports the blocked tasks through UnschedulableRemainderError.
    """
    with registry.lock:
        total = len(registry)
        if total == 0:
            logger.info("Schedule requested on an empty registry")
            return []

        if check_cycles:
            cycle = find_cycle(registry)
            if cycle is not None:
                raise CyclicDependencyError(cycle)

        remaining = registry.unresolved_counts()
        tasks = {task.name: task for task in registry.list_tasks()}

        frontier = [tasks[name].sort_key() for name, count in remaining.items() if count == 0]

        if not frontier:
            raise NoExecutableTasksError(registry.names())

        heapq.heapify(frontier)
        order: list[str] = []

        while frontier:
            _, _, name = heapq.heappop(frontier)
            order.append(name)

            for dependent in registry.dependents_of(name):
                remaining[dependent] -= 1
                if remaining[dependent] == 0:
                    heapq.heappush(frontier, tasks[dependent].sort_key())

        if len(order) != total:
            emitted = set(order)
            stuck = [name for name in registry.names() if name not in emitted]
            logger.error("Scheduling stopped early; stuck tasks: %s", stuck)
            raise UnschedulableRemainderError(stuck)

        logger.debug("Scheduled %d task(s): %s", total, order)
        return order
