# src/smart_todo/tasks/task_codec.py

"""
JSON encoding of the task sequence.

The same field set is used for the persistent slot (compact) and for the
export artifact (pretty-printed):

    [{"id": 1700000000000, "text": "Buy milk", "completed": false,
      "createdAt": "2023-11-14T22:13:20.000Z"}, ...]
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from .errors import PersistenceDecodeError
from .task_models import Task


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a 'Z' suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": format_timestamp(task.created_at),
    }


def encode_tasks(tasks: Iterable[Task], *, indent: int | None = None) -> str:
    payload = [task_to_dict(t) for t in tasks]
    if indent is None:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(payload, ensure_ascii=False, indent=indent)


def _task_from_dict(item: Any, index: int) -> Task:
    if not isinstance(item, dict):
        raise PersistenceDecodeError(f"item {index}: expected an object")

    task_id = item.get("id")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(task_id, int) or isinstance(task_id, bool):
        raise PersistenceDecodeError(f"item {index}: 'id' must be an integer")

    text = item.get("text")
    if not isinstance(text, str) or not text.strip():
        raise PersistenceDecodeError(f"item {index}: 'text' must be a non-empty string")

    completed = item.get("completed")
    if not isinstance(completed, bool):
        raise PersistenceDecodeError(f"item {index}: 'completed' must be a boolean")

    created_raw = item.get("createdAt")
    if not isinstance(created_raw, str):
        raise PersistenceDecodeError(f"item {index}: 'createdAt' must be a string")
    try:
        created_at = parse_timestamp(created_raw)
    except ValueError as e:
        raise PersistenceDecodeError(f"item {index}: bad 'createdAt' {created_raw!r}") from e

    return Task(id=task_id, text=text, completed=completed, created_at=created_at)


def decode_tasks(raw: str) -> list[Task]:
    """Parse a stored/exported sequence. Raises PersistenceDecodeError on any defect."""
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise PersistenceDecodeError(f"not valid JSON: {e}") from e
    except RecursionError as e:
        raise PersistenceDecodeError("JSON nested too deeply") from e

    if not isinstance(data, list):
        raise PersistenceDecodeError("expected a JSON array of tasks")

    tasks = [_task_from_dict(item, i) for i, item in enumerate(data)]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise PersistenceDecodeError(f"duplicate task id {t.id}")
        seen.add(t.id)

    return tasks
