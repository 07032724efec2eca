# src/nebula_todo/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit", "/q")


def run_console_loop(state: AppState, prompt: str = "> ") -> None:
    """
    Read-eval-print loop over the command registry.

    Ends on /exit, EOF or Ctrl+C. With unsaved changes the first /exit only
    warns; a second /exit in a row quits.
    """
    app_name = str(getattr(state.settings, "app_name", "nebula"))
    logger.info("Console started (tasks_path=%s).", state.tasks_path)
    print(f"[{app_name}] Type /help for commands, /exit to quit.")

    exit_armed = False

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            if state.unsaved_changes and not exit_armed:
                exit_armed = True
                print("You have unsaved changes. Use /save, or /exit again to quit without saving.")
                continue
            logger.info("Console exit command received.")
            break

        exit_armed = False

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        print(reply)

    logger.info("Console finished.")
