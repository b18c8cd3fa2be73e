# src/smart_todo/tasks/errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for every recoverable TaskStore error."""


class ValidationError(TaskStoreError, ValueError):
    """Task text is empty or whitespace-only."""


class NotFoundError(TaskStoreError, LookupError):
    """An operation referenced a task id that is not in the store."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class PersistenceDecodeError(TaskStoreError, ValueError):
    """Stored slot contents are not a valid task-sequence encoding."""
