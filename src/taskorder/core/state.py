# src/taskorder/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_graph import TaskRegistry
from .ports import ExecutionRecorder, PayloadStore


@dataclass
class AppState:
    # Settings are kept on the state for easy access from commands.
    settings: object

    registry: TaskRegistry
    store: PayloadStore
    execution_log: ExecutionRecorder

    @property
    def lock(self):
        """Registry lock; commands run under it so each one sees a consistent graph."""
        return self.registry.lock
