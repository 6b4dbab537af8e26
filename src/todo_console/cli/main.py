# src/todo_console/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (tasks loaded once), then runs the
console menu in the main thread until the user quits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        if state.task_store.has_unsaved_changes:
            logger.warning(
                "Exiting with unsaved changes; %s is out of date.", state.task_store.path
            )
        logger.info("Bye.")


if __name__ == "__main__":
    main()
