# src/nebula_todo/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .persistence import load_tasks, save_tasks

logger = logging.getLogger(__name__)


def save_state_tasks(state: AppState) -> int:
    """
    Write the current store contents to state.tasks_path.
    Returns the number of tasks written. Errors propagate; the store is untouched either way.
    """
    tasks = state.task_store.list()
    save_tasks(tasks, state.tasks_path)
    state.unsaved_changes = False
    return len(tasks)


def load_state_tasks(state: AppState) -> int:
    """
    Replace the store contents with the snapshot at state.tasks_path.

    The file is fully decoded before the store is touched, so a failed load
    leaves the in-memory tasks as they were.
    """
    tasks = load_tasks(state.tasks_path)
    state.task_store.replace_all(tasks)
    state.unsaved_changes = False
    logger.debug("Store reloaded from %s (%d tasks)", state.tasks_path, len(tasks))
    return len(tasks)
