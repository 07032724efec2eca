# src/nebula_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import InvalidStatusError


class TaskStatus(StrEnum):
    """
    Task status.

    Notes:
    - values are the exact tokens written to the snapshot file
    - transitions are free: any status may follow any other
    """

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    DONE = "Done"

    @property
    def label(self) -> str:
        """Human-readable form used by the table renderer."""
        return _LABELS[self]

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus:
        """
        Lenient parser for user input.

        Accepts the canonical tokens case-insensitively, common spellings of
        "in progress" and the menu positions 1/2/3.
        Raises InvalidStatusError for anything else.
        """
        if raw is None:
            raise InvalidStatusError(raw)
        key = " ".join(raw.strip().lower().replace("_", " ").replace("-", " ").split())
        status = _ALIASES.get(key)
        if status is None:
            raise InvalidStatusError(raw)
        return status


_LABELS = {
    TaskStatus.TODO: "Todo",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

_ALIASES = {
    "todo": TaskStatus.TODO,
    "to do": TaskStatus.TODO,
    "1": TaskStatus.TODO,
    "inprogress": TaskStatus.IN_PROGRESS,
    "in progress": TaskStatus.IN_PROGRESS,
    "doing": TaskStatus.IN_PROGRESS,
    "2": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.DONE,
    "3": TaskStatus.DONE,
}


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
