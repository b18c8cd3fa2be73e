# src/smart_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the slot storage, the TaskStore and the notifier into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..core.ports import Notifier
from ..core.state import AppState
from ..tasks.slot_storage import SqliteSlotStorage
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    notifier: Notifier,
    settings=None,
    confirm: Callable[[str], bool] | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    slot = SqliteSlotStorage(settings.db_path)
    store = TaskStore(slot, key=settings.slot_key)

    state = AppState(settings=settings, store=store, notifier=notifier)
    if confirm is not None:
        state.confirm = confirm

    logger.debug("State created db=%s key=%s", settings.db_path, settings.slot_key)
    return state
