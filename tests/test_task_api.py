# tests/test_task_api.py

from __future__ import annotations

import pytest

from nebula_todo.core.state import AppState
from nebula_todo.tasks.errors import TaskDecodeError, TaskNotFoundError
from nebula_todo.tasks.persistence import load_tasks
from nebula_todo.tasks.task_api import load_state_tasks, save_state_tasks
from nebula_todo.tasks.task_models import Task, TaskStatus
from nebula_todo.tasks.task_store import TaskStore


def test_end_to_end_scenario(state: AppState) -> None:
    store = state.task_store

    milk = store.add("Buy milk", "")
    assert (milk.id, milk.status) == (1, TaskStatus.TODO)
    assert store.add("Write report", "draft").id == 2

    assert store.remove(1) == milk
    assert [t.id for t in store.list()] == [2]

    assert store.add("Call plumber", "").id == 3

    store.update_status(2, TaskStatus.DONE)
    assert [(t.id, t.status) for t in store.list()] == [
        (2, TaskStatus.DONE),
        (3, TaskStatus.TODO),
    ]

    assert save_state_tasks(state) == 2
    assert load_tasks(state.tasks_path) == [
        Task(id=2, title="Write report", description="draft", status=TaskStatus.DONE),
        Task(id=3, title="Call plumber", description="", status=TaskStatus.TODO),
    ]

    with pytest.raises(TaskNotFoundError):
        store.remove(1)


def test_load_into_fresh_store_restores_counter(state: AppState, settings) -> None:
    state.task_store.add("a")
    state.task_store.add("b")
    state.task_store.remove(1)
    save_state_tasks(state)

    fresh = AppState(settings=settings, task_store=TaskStore(), tasks_path=state.tasks_path)
    assert load_state_tasks(fresh) == 1
    assert fresh.task_store.add("c").id == 3


def test_load_missing_file_gives_empty_store(state: AppState) -> None:
    state.task_store.add("unsaved")
    state.unsaved_changes = True

    assert load_state_tasks(state) == 0
    assert len(state.task_store) == 0
    assert not state.unsaved_changes


def test_failed_load_leaves_store_untouched(state: AppState) -> None:
    state.task_store.add("keep")
    state.unsaved_changes = True
    state.tasks_path.write_text('[{"id": 1}]', "utf-8")

    with pytest.raises(TaskDecodeError):
        load_state_tasks(state)

    assert [t.title for t in state.task_store.list()] == ["keep"]
    assert state.unsaved_changes
