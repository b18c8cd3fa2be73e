# src/smart_todo/tasks/task_api.py

"""
High-level helpers used by the presentation layer.

Each helper runs one TaskStore operation against state.store and reports the
outcome as a notification. Store errors are translated here; they never
reach the connector.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.notifications import Severity
from ..core.state import AppState
from .errors import NotFoundError, ValidationError
from .task_models import Task, TaskFilter

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "todo-tasks.json"
CLEAR_PROMPT = "Are you sure you want to clear all tasks?"


def _not_found(state: AppState, e: NotFoundError) -> None:
    logger.warning("Task operation on missing id=%s", e.task_id)
    state.notify(f"Task {e.task_id} not found.", Severity.ERROR)


def add_task(state: AppState, text: str) -> Task | None:
    try:
        task = state.store.add(text)
    except ValidationError:
        state.notify("Please enter a task!", Severity.WARNING)
        return None
    state.notify("Task added successfully!", Severity.SUCCESS)
    return task


def toggle_task(state: AppState, task_id: int) -> Task | None:
    try:
        task = state.store.toggle(task_id)
    except NotFoundError as e:
        _not_found(state, e)
        return None
    state.notify(
        "Task completed!" if task.completed else "Task marked as pending",
        Severity.SUCCESS,
    )
    return task


def delete_task(state: AppState, task_id: int) -> Task | None:
    try:
        task = state.store.delete(task_id)
    except NotFoundError as e:
        _not_found(state, e)
        return None
    state.notify("Task deleted!", Severity.INFO)
    return task


def clear_all_tasks(state: AppState, *, confirmed: bool = False) -> bool:
    """Clear everything after a yes from state.confirm (skipped when confirmed=True)."""
    if not confirmed and not state.confirm(CLEAR_PROMPT):
        state.notify("Clear cancelled.", Severity.INFO)
        return False
    state.store.clear_all()
    state.notify("All tasks cleared!", Severity.INFO)
    return True


def set_filter(state: AppState, raw: TaskFilter | str) -> TaskFilter | None:
    try:
        state.current_filter = TaskFilter.parse(raw)
    except ValueError as e:
        state.notify(str(e), Severity.WARNING)
        return None
    return state.current_filter


def export_tasks(state: AppState, directory: str | Path | None = None) -> Path | None:
    """Write the full sequence to <directory>/todo-tasks.json (atomic replace)."""
    if directory is None:
        directory = getattr(state.settings, "export_dir", Path("."))
    path = Path(directory).expanduser() / EXPORT_FILENAME

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(state.store.export() + "\n", "utf-8")
        os.replace(tmp, path)
    except OSError as e:
        logger.exception("Failed to export tasks to %s", path)
        state.notify(f"Export failed: {e.strerror or e}", Severity.ERROR)
        return None

    logger.info("Exported %d tasks to %s", len(state.store), path)
    state.notify(f"Tasks exported to {path}", Severity.SUCCESS)
    return path
