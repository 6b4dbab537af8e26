# src/todo_console/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%s).", state.task_store.path)
    print("=== Simple To-Do List (console) ===")
    if getattr(state.settings, "show_help", True):
        print(command_registry.build_help())

    while True:
        try:
            line = input("\nChoose command (h for help): ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.lower() in QUIT_COMMANDS:
            logger.info("Console quit command received.")
            print("Goodbye!")
            break

        try:
            response = command_registry.handle(state, line, prompt=input)
        except (EOFError, KeyboardInterrupt):
            logger.info("Console input closed while a command was prompting, exiting.")
            print()
            break
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    logger.info("Console connector finished.")
