# src/smart_todo/core/ports.py

"""
Ports (interfaces) used by the core.

The store and the presentation helpers depend on Protocols instead of
concrete implementations, so storage and output stay swappable in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .notifications import Notification


class SlotStorage(Protocol):
    """Named key-value slots; each write replaces the whole value."""

    def read(self, key: str) -> str | None: ...
    def write(self, key: str, value: str) -> None: ...


class Notifier(Protocol):
    """Presentation-side sink for transient user-facing messages."""

    def notify(self, notification: Notification) -> None: ...
