# src/taskorder/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class TaskFileStore:
    """
    File-backed store for the JSON task payload.

    The store only moves text: encoding/decoding belongs to task_codec.
    Writes go to a sibling .tmp file first and are swapped in with os.replace,
    so a crash never leaves a half-written payload behind.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read_text(self) -> str | None:
        """Return the stored payload, or None if nothing was saved yet."""
        if not self._path.exists():
            logger.info("No saved tasks found at %s", self._path)
            return None
        text = self._path.read_text("utf-8")
        logger.debug("Read %d bytes from %s", len(text), self._path)
        return text

    def write_text(self, text: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(text, "utf-8")
        os.replace(tmp, self._path)
        logger.info("Saved task payload to %s", self._path)
