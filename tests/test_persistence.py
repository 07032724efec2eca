# tests/test_persistence.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from nebula_todo.tasks.errors import TaskDecodeError, TaskPersistenceError
from nebula_todo.tasks.persistence import load_tasks, save_tasks, task_from_record
from nebula_todo.tasks.task_models import Task, TaskStatus


@pytest.mark.parametrize(
    "tasks",
    [
        [],
        [Task(id=1, title="Buy milk")],
        [
            Task(id=2, title="Write report", description="draft", status=TaskStatus.DONE),
            Task(id=5, title="Позвонить сантехнику", description="", status=TaskStatus.IN_PROGRESS),
            Task(id=7, title="Café ☕", description='quotes " and \\ slashes\nnewline'),
        ],
    ],
    ids=["empty", "one", "many"],
)
def test_round_trip(tmp_path: Path, tasks: list[Task]) -> None:
    path = tmp_path / "tasks.json"
    save_tasks(tasks, path)
    assert load_tasks(path) == tasks


def test_file_schema(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    save_tasks([Task(id=3, title="t", status=TaskStatus.IN_PROGRESS)], path)

    data = json.loads(path.read_text("utf-8"))
    assert data == [{"id": 3, "title": "t", "description": "", "status": "InProgress"}]
    assert isinstance(data[0]["id"], int)


def test_save_overwrites_previous_snapshot(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    save_tasks([Task(id=1, title="a"), Task(id=2, title="b"), Task(id=3, title="c")], path)
    save_tasks([Task(id=2, title="b")], path)

    assert load_tasks(path) == [Task(id=2, title="b")]
    assert not (tmp_path / "tasks.json.tmp").exists()


def test_load_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_tasks(tmp_path / "nope.json") == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        '{"id": 1}',
        '[{"id": 1, "title": "a", "description": ""}]',
        '[{"id": "1", "title": "a", "description": "", "status": "Todo"}]',
        '[{"id": true, "title": "a", "description": "", "status": "Todo"}]',
        '[{"id": 1, "title": 5, "description": "", "status": "Todo"}]',
        '[{"id": 1, "title": "a", "description": null, "status": "Todo"}]',
        '[{"id": 1, "title": "a", "description": "", "status": "Blocked"}]',
        '[{"id": 1, "title": "a", "description": "", "status": "todo"}]',
        '[1, 2]',
    ],
)
def test_load_malformed_raises_decode_error(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(content, "utf-8")

    with pytest.raises(TaskDecodeError):
        load_tasks(path)


def test_load_rejects_duplicate_ids(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    rec = {"id": 1, "title": "a", "description": "", "status": "Todo"}
    path.write_text(json.dumps([rec, rec]), "utf-8")

    with pytest.raises(TaskDecodeError, match="duplicate"):
        load_tasks(path)


def test_load_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_bytes(b"[\xff\xfe]")

    with pytest.raises(TaskDecodeError):
        load_tasks(path)


def test_load_ignores_unknown_fields(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 4,
                    "title": "a",
                    "description": "d",
                    "status": "Done",
                    "priority": "high",
                    "tags": ["x"],
                }
            ]
        ),
        "utf-8",
    )

    assert load_tasks(path) == [Task(id=4, title="a", description="d", status=TaskStatus.DONE)]


def test_save_into_missing_directory_is_persistence_error(tmp_path: Path) -> None:
    path = tmp_path / "missing" / "tasks.json"

    with pytest.raises(TaskPersistenceError) as exc:
        save_tasks([Task(id=1, title="a")], path)

    assert not isinstance(exc.value, TaskDecodeError)
    assert exc.value.path == path


def test_load_directory_is_persistence_error(tmp_path: Path) -> None:
    with pytest.raises(TaskPersistenceError):
        load_tasks(tmp_path)


def test_task_from_record_error_mentions_missing_fields() -> None:
    with pytest.raises(ValueError, match="status"):
        task_from_record({"id": 1, "title": "a", "description": ""})


def test_load_deeply_nested_json_is_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("[" * 100000 + "]" * 100000, "utf-8")

    with pytest.raises(TaskDecodeError):
        load_tasks(path)


def test_failed_replace_keeps_previous_snapshot(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "tasks.json"
    first = [Task(id=1, title="a"), Task(id=2, title="b", status=TaskStatus.DONE)]
    save_tasks(first, path)

    def failing_replace(src, dst):
        raise OSError(28, "No space left on device")

    monkeypatch.setattr("nebula_todo.tasks.persistence.os.replace", failing_replace)

    with pytest.raises(TaskPersistenceError):
        save_tasks([Task(id=3, title="c")], path)

    monkeypatch.undo()
    assert load_tasks(path) == first
    assert not (tmp_path / "tasks.json.tmp").exists()
