# src/smart_todo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from datetime import datetime, timezone

from ..core.ports import SlotStorage
from .errors import NotFoundError, PersistenceDecodeError, ValidationError
from .id_gen import MonotonicIdGenerator
from .task_codec import decode_tasks, encode_tasks
from .task_models import Task, TaskFilter, TaskStats

logger = logging.getLogger(__name__)

EXPORT_INDENT = 2


class TaskStore:
    """
    Ordered, newest-first task collection mirrored to a persistent slot.

    Rules:
    - new tasks are prepended; nothing ever re-sorts the sequence
    - ids are unique for the lifetime of the slot
    - every mutation writes the whole sequence to the slot before returning
    - preconditions are checked before mutating, so an error never leaves
      a half-applied change behind
    """

    def __init__(
        self,
        slot: SlotStorage,
        *,
        key: str = "tasks",
        id_generator: MonotonicIdGenerator | None = None,
    ) -> None:
        self._slot = slot
        self._key = key
        # Highest id ever issued; survives delete and clear_all so ids are never reused.
        self._last_id_key = f"{key}.last_id"
        self._ids = id_generator or MonotonicIdGenerator()
        self._tasks: list[Task] = self._load()
        for t in self._tasks:
            self._ids.observe(t.id)
        self._ids.observe(self._load_last_id())
        logger.info("TaskStore ready key=%s total=%d", self._key, len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        raw = self._slot.read(self._key)
        if raw is None:
            return []
        try:
            return decode_tasks(raw)
        except PersistenceDecodeError as e:
            backup_key = self._free_backup_key()
            logger.warning(
                "Stored tasks unreadable (%s); starting empty, raw value kept under %s",
                e,
                backup_key,
            )
            try:
                self._slot.write(backup_key, raw)
            except Exception:
                logger.exception("Failed to keep unreadable tasks under %s", backup_key)
            return []

    def _free_backup_key(self) -> str:
        base = f"{self._key}.corrupt"
        key, n = base, 1
        while self._slot.read(key) is not None:
            n += 1
            key = f"{base}.{n}"
        return key

    def _load_last_id(self) -> int:
        raw = self._slot.read(self._last_id_key)
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring unreadable id high-water mark %r", raw)
            return 0

    def _commit(self, new_tasks: list[Task]) -> None:
        """Persist first, then swap the in-memory sequence."""
        self._slot.write(self._key, encode_tasks(new_tasks))
        self._tasks = new_tasks

    def _index_of(self, task_id: int) -> int:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        raise NotFoundError(task_id)

    # ---- mutations ----

    def add(self, text: str) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise ValidationError("Task text must not be empty")

        now = datetime.now(timezone.utc)
        task = Task(
            id=self._ids.next_id(),
            text=clean,
            completed=False,
            # Stored timestamps keep milliseconds only.
            created_at=now.replace(microsecond=now.microsecond // 1000 * 1000),
        )
        self._slot.write(self._last_id_key, str(task.id))
        self._commit([task, *self._tasks])
        logger.debug("Task added id=%s", task.id)
        return task

    def toggle(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        updated = replace(self._tasks[idx], completed=not self._tasks[idx].completed)

        new_tasks = list(self._tasks)
        new_tasks[idx] = updated
        self._commit(new_tasks)
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated

    def delete(self, task_id: int) -> Task:
        idx = self._index_of(task_id)
        removed = self._tasks[idx]
        self._commit(self._tasks[:idx] + self._tasks[idx + 1 :])
        logger.debug("Task deleted id=%s", task_id)
        return removed

    def clear_all(self) -> int:
        n = len(self._tasks)
        self._commit([])
        logger.info("All tasks cleared (removed=%d)", n)
        return n

    # ---- reads ----

    def get(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    def filtered_view(self, task_filter: TaskFilter | str = TaskFilter.ALL) -> list[Task]:
        f = TaskFilter.parse(task_filter)
        return [t for t in self._tasks if f.matches(t)]

    def stats(self) -> TaskStats:
        return TaskStats(
            total=len(self._tasks),
            completed=sum(1 for t in self._tasks if t.completed),
        )

    def export(self) -> str:
        """Pretty-printed JSON of the full sequence (not the filtered view)."""
        return encode_tasks(self._tasks, indent=EXPORT_INDENT)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
