# src/smart_todo/tasks/id_gen.py

from __future__ import annotations

import time
from collections.abc import Callable


class MonotonicIdGenerator:
    """
    Millisecond-timestamp ids that never collide.

    Each id is max(now_ms, last + 1): two calls inside the same millisecond,
    or a wall clock stepping backwards, still produce strictly increasing ids.
    """

    def __init__(self, *, clock: Callable[[], float] = time.time, last_id: int = 0) -> None:
        self._clock = clock
        self._last = int(last_id)

    @property
    def last_id(self) -> int:
        return self._last

    def observe(self, task_id: int) -> None:
        """Make sure future ids are greater than an id loaded from storage."""
        if task_id > self._last:
            self._last = int(task_id)

    def next_id(self) -> int:
        now_ms = int(self._clock() * 1000)
        self._last = max(now_ms, self._last + 1)
        return self._last
