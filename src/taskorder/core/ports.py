# src/taskorder/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API.

The API depends on Protocols instead of concrete implementations, so the
file-backed store and the log file can be swapped for in-memory fakes in tests.
"""

from collections.abc import Iterable
from typing import Protocol


class PayloadStore(Protocol):
    """Where the JSON task payload is read from / written to."""

    def read_text(self) -> str | None: ...
    def write_text(self, text: str) -> None: ...


class ExecutionRecorder(Protocol):
    """Receives the emitted order, one name per executed task."""

    def record(self, names: Iterable[str]) -> int: ...
