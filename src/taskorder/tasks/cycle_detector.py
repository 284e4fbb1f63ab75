# src/taskorder/tasks/cycle_detector.py

"""
Cycle detection over the registry's dependency graph.

Three-colour depth-first search following the forward edges
(task -> tasks waiting on it):
- WHITE: not visited yet
- GREY: on the current DFS path
- BLACK: fully explored

An edge into a GREY node closes a cycle. Every task is tried as a root, so
disconnected components are all covered. The walk uses an explicit stack, so
long dependency chains do not hit the interpreter recursion limit.
"""

from __future__ import annotations

import logging

from .task_graph import TaskRegistry

logger = logging.getLogger(__name__)

WHITE, GREY, BLACK = 0, 1, 2


def find_cycle(registry: TaskRegistry) -> list[str] | None:
    """
    Return one cycle as a closed path (first == last), or None if the graph is acyclic.
    """
    with registry.lock:
        names = registry.names()
        color = {name: WHITE for name in names}

        for root in names:
            if color[root] != WHITE:
                continue

            # (node, iterator over its dependents); the stack doubles as the DFS path.
            color[root] = GREY
            stack = [(root, iter(registry.dependents_of(root)))]

            while stack:
                node, children = stack[-1]
                advanced = False
                for child in children:
                    state = color.get(child, BLACK)
                    if state == GREY:
                        path = [n for n, _ in stack]
                        cycle = path[path.index(child):] + [child]
                        logger.debug("Cycle found: %s", " -> ".join(cycle))
                        return cycle
                    if state == WHITE:
                        color[child] = GREY
                        stack.append((child, iter(registry.dependents_of(child))))
                        advanced = True
                        break
                if not advanced:
                    color[node] = BLACK
                    stack.pop()

    return None


def has_cycle(registry: TaskRegistry) -> bool:
    return find_cycle(registry) is not None
