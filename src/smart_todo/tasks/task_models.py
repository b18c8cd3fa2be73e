# src/smart_todo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class TaskFilter(StrEnum):
    """
    Read-only view selector.

    Session state only: never persisted, never changes the stored sequence.
    """

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, raw: TaskFilter | str | None) -> TaskFilter:
        """Accept an enum member or its string value; unknown strings raise ValueError."""
        if raw is None:
            return cls.ALL
        if isinstance(raw, cls):
            return raw
        value = str(raw).strip().lower()
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown filter {raw!r}; expected one of: {names}") from None

    def matches(self, task: Task) -> bool:
        if self is TaskFilter.COMPLETED:
            return task.completed
        if self is TaskFilter.PENDING:
            return not task.completed
        return True


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    text: str
    completed: bool
    created_at: datetime  # tz-aware UTC


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int

    @property
    def pending(self) -> int:
        return self.total - self.completed
