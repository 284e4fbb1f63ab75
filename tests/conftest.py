# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskorder.core.state import AppState
from taskorder.tasks.execution_log import ExecutionLog
from taskorder.tasks.task_graph import TaskRegistry
from taskorder.tasks.task_store import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI helpers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskorder-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_path=tmp_path / "tasks.json",
        execution_log_path=tmp_path / "tasks_log.txt",
        autoload=False,
        autosave=False,
    )


@pytest.fixture()
def registry() -> TaskRegistry:
    return TaskRegistry()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with the real file store and execution log.

    Files live under tmp_path; their format is part of what we want to test.
    """
    return AppState(
        settings=settings,
        registry=TaskRegistry(),
        store=TaskFileStore(settings.tasks_path),
        execution_log=ExecutionLog(settings.execution_log_path),
    )
