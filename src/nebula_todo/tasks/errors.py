# src/nebula_todo/tasks/errors.py

"""Exceptions raised by the task store and the snapshot file layer."""

from __future__ import annotations

from pathlib import Path


class TaskError(Exception):
    """Base class for all task-related failures."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} not found.")
        self.task_id = task_id


class InvalidStatusError(TaskError, ValueError):
    def __init__(self, token: object) -> None:
        super().__init__(
            f"Invalid status {token!r}. Use one of: Todo, InProgress, Done."
        )
        self.token = token


class TaskPersistenceError(TaskError):
    """The snapshot file could not be read or written."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class TaskDecodeError(TaskPersistenceError):
    """The snapshot file exists but does not match the expected schema."""
