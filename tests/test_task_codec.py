# tests/test_task_codec.py

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from smart_todo.tasks.errors import PersistenceDecodeError
from smart_todo.tasks.task_codec import decode_tasks, encode_tasks, format_timestamp
from smart_todo.tasks.task_models import Task


def _task(task_id: int = 1, **kw) -> Task:
    return Task(
        id=task_id,
        text=kw.get("text", "Buy milk"),
        completed=kw.get("completed", False),
        created_at=kw.get("created_at", datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)),
    )


def test_encode_uses_browser_field_names() -> None:
    data = json.loads(encode_tasks([_task(completed=True)]))

    assert data == [
        {
            "id": 1,
            "text": "Buy milk",
            "completed": True,
            "createdAt": "2024-01-02T03:04:05.678Z",
        }
    ]


def test_format_timestamp_converts_to_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    dt = datetime(2024, 1, 2, 5, 0, 0, tzinfo=plus_two)

    assert format_timestamp(dt) == "2024-01-02T03:00:00.000Z"


def test_decode_reads_javascript_export() -> None:
    raw = (
        '[{"id":1700000000001,"text":"Walk dog","completed":false,'
        '"createdAt":"2023-11-14T22:13:20.001Z"},'
        '{"id":1700000000000,"text":"Buy milk","completed":true,'
        '"createdAt":"2023-11-14T22:13:20.000Z"}]'
    )

    tasks = decode_tasks(raw)

    assert [t.text for t in tasks] == ["Walk dog", "Buy milk"]
    assert tasks[1].completed is True
    assert tasks[0].created_at.tzinfo is not None


def test_decode_accepts_naive_timestamp_as_utc() -> None:
    raw = '[{"id":1,"text":"x","completed":false,"createdAt":"2024-01-02T03:04:05"}]'
    (task,) = decode_tasks(raw)
    assert task.created_at == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_decode_empty_array() -> None:
    assert decode_tasks("[]") == []


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        "{}",
        "null",
        "[1]",
        '[{"text":"x","completed":false,"createdAt":"2024-01-01T00:00:00Z"}]',
        '[{"id":true,"text":"x","completed":false,"createdAt":"2024-01-01T00:00:00Z"}]',
        '[{"id":1,"text":"  ","completed":false,"createdAt":"2024-01-01T00:00:00Z"}]',
        '[{"id":1,"text":"x","completed":"no","createdAt":"2024-01-01T00:00:00Z"}]',
        '[{"id":1,"text":"x","completed":false,"createdAt":"yesterday"}]',
        '[{"id":1,"text":"x","completed":false}]',
        "[" * 100_000 + "]" * 100_000,
    ],
)
def test_decode_rejects_bad_encodings(raw: str) -> None:
    with pytest.raises(PersistenceDecodeError):
        decode_tasks(raw)


def test_decode_rejects_duplicate_ids() -> None:
    raw = encode_tasks([_task(7, text="a"), _task(7, text="b")])
    with pytest.raises(PersistenceDecodeError, match="duplicate"):
        decode_tasks(raw)


def test_pretty_encoding_decodes_to_same_tasks() -> None:
    tasks = [_task(2, text="b", completed=True), _task(1, text="a")]
    assert decode_tasks(encode_tasks(tasks, indent=2)) == tasks
