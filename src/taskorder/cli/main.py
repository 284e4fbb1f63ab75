# src/taskorder/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, restores saved tasks, then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, persist_tasks, restore_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    if settings.autoload:
        restore_tasks(state)

    try:
        run_console_loop(state)
    finally:
        if settings.autosave and len(state.registry):
            persist_tasks(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
