# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from smart_todo.core.state import AppState
from smart_todo.tasks.slot_storage import SqliteSlotStorage
from smart_todo.tasks.task_store import TaskStore

from .fakes import RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="smart-todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "todo.sqlite3",
        export_dir=tmp_path / "exports",
        slot_key="tasks",
        recommended_tasks=["Drink water", "Stretch"],
    )


@pytest.fixture()
def slot(settings: SimpleNamespace) -> SqliteSlotStorage:
    return SqliteSlotStorage(settings.db_path)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def state(settings: SimpleNamespace, slot: SqliteSlotStorage, notifier: RecordingNotifier) -> AppState:
    """
    AppState wired with a recording notifier.

    NOTE: We keep the real SQLite slot storage here because persistence is
    part of what we want to test.
    """
    return AppState(
        settings=settings,
        store=TaskStore(slot, key=settings.slot_key),
        notifier=notifier,
    )
