# src/nebula_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging and console colours, builds AppState, optionally loads
the saved tasks, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

import colorama

from ..cli.bootstrap import create_initial_state, load_on_start
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    # Nothing is written implicitly; only /save persists.
    if state.unsaved_changes:
        logger.warning("Exiting with unsaved changes (%d tasks in memory).", len(state.task_store))


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    # ANSI support on legacy Windows consoles; no-op elsewhere.
    colorama.just_fix_windows_console()

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    notice = load_on_start(state)
    if notice:
        print(notice)

    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")
        print("Goodbye!")


if __name__ == "__main__":
    main()
