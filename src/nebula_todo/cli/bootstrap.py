# src/nebula_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings once (injectable for tests),
- builds the TaskStore and AppState,
- optionally loads the saved snapshot at startup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.errors import TaskPersistenceError
from ..tasks.task_api import load_state_tasks
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    The store always starts empty; see load_on_start().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=Path(settings.tasks_path),
        color=bool(getattr(settings, "color", True)),
    )


def load_on_start(state: AppState) -> str | None:
    """
    Load the snapshot into the fresh store when enabled in settings.

    Returns a user-facing notice, or None when loading is disabled.
    A bad or unreadable file is reported and the session starts empty.
    """
    if not getattr(state.settings, "load_on_start", False):
        return None

    try:
        n = load_state_tasks(state)
    except TaskPersistenceError as e:
        logger.warning("Startup load failed: %s", e)
        return f"Could not load {state.tasks_path}: {e}\nStarting with an empty task list."

    logger.info("Startup load: %d tasks from %s", n, state.tasks_path)
    return f"Loaded {n} task(s) from {state.tasks_path}"
