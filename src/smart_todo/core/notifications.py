# src/smart_todo/core/notifications.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Severity(StrEnum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    severity: Severity = Severity.INFO

    def __str__(self) -> str:
        return f"[{self.severity.value.upper()}] {self.message}"
