# src/smart_todo/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_models import TaskFilter
from ..tasks.task_store import TaskStore
from .notifications import Notification, Severity
from .ports import Notifier


def _deny(_prompt: str) -> bool:
    return False


@dataclass
class AppState:
    """
    Everything a presentation session owns.

    The store is held here and handed to handlers explicitly; there is no
    module-level store instance.
    """

    settings: Any
    store: TaskStore
    notifier: Notifier

    # Session-only view selector; resets to ALL on every start.
    current_filter: TaskFilter = TaskFilter.ALL

    # Asks the user a yes/no question. Connectors replace it; the default declines.
    confirm: Callable[[str], bool] = field(default=_deny)

    def notify(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        n = Notification(message=message, severity=severity)
        self.notifier.notify(n)
        return n
