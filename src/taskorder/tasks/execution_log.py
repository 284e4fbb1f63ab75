# src/taskorder/tasks/execution_log.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ExecutionLog:
    """
    Append-only text log of executed tasks.

    One line per task, in execution order:
        [2024-01-31 12:00:00] Executed Task: build
    """

    def __init__(self, path: str | Path = "tasks_log.txt", *, clock: Callable[[], str] = _ts_local) -> None:
        self._path = Path(path)
        self._clock = clock

    @property
    def path(self) -> Path:
        return self._path

    def record(self, names: Iterable[str]) -> int:
        """Append one line per name; returns how many lines were written."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        with self._path.open("a", encoding="utf-8") as fh:
            for name in names:
                fh.write(f"[{self._clock()}] Executed Task: {name}\n")
                logger.info("Executed task %s", name)
                written += 1
        return written

    def read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        return self._path.read_text("utf-8").splitlines()
