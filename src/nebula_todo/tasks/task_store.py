# src/nebula_todo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace

from .errors import TaskNotFoundError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task collection and id assignment:
    - ids come from a monotonic counter and are never reused, even after remove
    - insertion order is kept; update/remove never reorder the rest
    - tasks are immutable; status updates swap in a new value at the same position

    No I/O happens here. Snapshots are written/read by tasks.persistence.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        if tasks is not None:
            self.replace_all(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.list())

    @property
    def next_id(self) -> int:
        """Id that the next add() will assign."""
        return self._next_id

    # ---- low-level helpers ----

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise TaskNotFoundError(task_id)

    def _allocate_id(self) -> int:
        nid = self._next_id
        self._next_id += 1
        return nid

    # ---- public API ----

    def add(self, title: str, description: str = "") -> Task:
        task = Task(
            id=self._allocate_id(),
            title=title,
            description=description,
            status=TaskStatus.TODO,
        )
        self._tasks.append(task)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> tuple[Task, ...]:
        """Read-only snapshot of all tasks in insertion order."""
        return tuple(self._tasks)

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def update_status(self, task_id: int, new_status: TaskStatus) -> Task:
        idx = self._index_of(task_id)
        old = self._tasks[idx]
        updated = replace(old, status=new_status)
        self._tasks[idx] = updated
        logger.debug("Task status id=%s %s -> %s", task_id, old.status, new_status)
        return updated

    def remove(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        task = self._tasks.pop(idx)
        logger.debug("Task removed id=%s", task_id)
        return task

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Replace the whole collection (used when loading a snapshot).

        The id counter only moves forward: it becomes at least max(id) + 1,
        so ids handed out earlier in this session stay unused.
        """
        new_tasks = [*tasks]
        seen: set[int] = set()
        for t in new_tasks:
            if t.id in seen:
                raise ValueError(f"duplicate task id {t.id}")
            seen.add(t.id)

        self._tasks = new_tasks
        if new_tasks:
            self._next_id = max(self._next_id, max(seen) + 1)
        logger.debug("Store replaced: %d tasks, next_id=%s", len(new_tasks), self._next_id)
