# src/taskorder/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the registry, payload store and execution log into AppState,
- optionally restores / persists the task payload around a session.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.execution_log import ExecutionLog
from ..tasks.task_errors import ParseError
from ..tasks.task_graph import TaskRegistry
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.execution_log_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        registry=TaskRegistry(),
        store=TaskFileStore(settings.tasks_path),
        execution_log=ExecutionLog(settings.execution_log_path),
    )


def restore_tasks(state: AppState) -> int:
    """
    Load previously saved tasks at startup.

    A missing file is normal (first run). A corrupt file is logged and skipped so
    the session can still start with an empty registry.
    """
    try:
        n = task_api.load_tasks(state)
    except ParseError:
        logger.exception(
            "Saved tasks at %s are invalid; starting empty.",
            getattr(state.store, "path", "?"),
        )
        return 0
    if n is None:
        return 0
    logger.info("Restored %d task(s)", n)
    return n


def persist_tasks(state: AppState) -> None:
    try:
        n = task_api.save_tasks(state)
    except OSError:
        logger.exception("Failed to save tasks.")
        return
    logger.info("Saved %d task(s) on shutdown", n)
