# src/nebula_todo/tasks/persistence.py

"""
JSON snapshot file for the task store.

File format (UTF-8, pretty-printed):

    [
      {"id": 1, "title": "...", "description": "...", "status": "Todo"},
      ...
    ]

- save overwrites the whole file (temp file + os.replace)
- load of a missing file is "no snapshot yet" and returns []
- unknown extra keys are ignored on load; anything else off-schema is a TaskDecodeError
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import TaskDecodeError, TaskPersistenceError
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"

_FIELDS = ("id", "title", "description", "status")


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": int(task.id),
        "title": task.title,
        "description": task.description,
        "status": TaskStatus(task.status).value,
    }


def task_from_record(raw: Any) -> Task:
    """Decode one record. Raises ValueError describing the first problem found."""
    if not isinstance(raw, dict):
        raise ValueError(f"expected an object, got {type(raw).__name__}")

    missing = [k for k in _FIELDS if k not in raw]
    if missing:
        raise ValueError(f"missing field(s): {', '.join(missing)}")

    task_id = raw["id"]
    # bool is an int subclass; reject it explicitly.
    if not isinstance(task_id, int) or isinstance(task_id, bool) or task_id < 1:
        raise ValueError(f"id must be a positive integer, got {task_id!r}")

    title, description = raw["title"], raw["description"]
    if not isinstance(title, str):
        raise ValueError(f"title must be a string (id={task_id})")
    if not isinstance(description, str):
        raise ValueError(f"description must be a string (id={task_id})")

    status_raw = raw["status"]
    try:
        status = TaskStatus(status_raw)
    except ValueError:
        raise ValueError(f"unknown status {status_raw!r} (id={task_id})") from None

    return Task(id=task_id, title=title, description=description, status=status)


def save_tasks(tasks: Iterable[Task], path: str | Path) -> None:
    """Write all tasks to `path`, fully replacing any previous content."""
    path = Path(path)
    records = [task_to_record(t) for t in tasks]

    try:
        payload = json.dumps(records, ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise TaskPersistenceError(f"Failed to encode tasks: {exc}", path) from exc

    tmp = path.with_name(path.name + ".tmp")
    try:
        tmp.write_text(payload + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        # Leave no stray temp file behind; the old snapshot (if any) is untouched.
        try:
            tmp.unlink(missing_ok=True)
        except OSError:
            logger.debug("Could not remove temp file %s", tmp, exc_info=True)
        raise TaskPersistenceError(f"Failed to write {path}: {exc.strerror or exc}", path) from exc

    logger.info("Saved %d tasks to %s", len(records), path)


def load_tasks(path: str | Path) -> list[Task]:
    """Read tasks from `path`. A missing file yields an empty list."""
    path = Path(path)
    if not path.exists():
        logger.info("No tasks file at %s; starting empty.", path)
        return []

    try:
        text = path.read_text("utf-8")
    except UnicodeDecodeError as exc:
        raise TaskDecodeError(f"{path} is not valid UTF-8: {exc}", path) from exc
    except OSError as exc:
        raise TaskPersistenceError(f"Failed to read {path}: {exc.strerror or exc}", path) from exc

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        # RecursionError: nesting deeper than the decoder can handle.
        raise TaskDecodeError(f"{path} is not valid JSON: {exc}", path) from exc

    if not isinstance(data, list):
        raise TaskDecodeError(f"{path}: expected a JSON array of tasks", path)

    tasks: list[Task] = []
    seen: set[int] = set()
    for i, raw in enumerate(data):
        try:
            task = task_from_record(raw)
        except ValueError as exc:
            raise TaskDecodeError(f"{path}: record {i}: {exc}", path) from exc
        if task.id in seen:
            raise TaskDecodeError(f"{path}: duplicate task id {task.id}", path)
        seen.add(task.id)
        tasks.append(task)

    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks
