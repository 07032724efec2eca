# src/nebula_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskRepo
    tasks_path: Path
    color: bool = True

    # Set by mutating commands, cleared by a successful save/load.
    unsaved_changes: bool = False
