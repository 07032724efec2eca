# src/nebula_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

Commands depend on this Protocol rather than on TaskStore directly,
which keeps the shell testable with any store exposing the same calls.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task, TaskStatus


class TaskRepo(Protocol):
    def add(self, title: str, description: str = "") -> Task: ...
    def list(self) -> tuple[Task, ...]: ...
    def get(self, task_id: int) -> Task: ...
    def update_status(self, task_id: int, new_status: TaskStatus) -> Task: ...
    def remove(self, task_id: int) -> Task: ...
    def replace_all(self, tasks: Iterable[Task]) -> None: ...
    def __len__(self) -> int: ...
