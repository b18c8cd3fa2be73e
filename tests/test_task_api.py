# tests/test_task_api.py

from __future__ import annotations

import json

from smart_todo.core.notifications import Severity
from smart_todo.tasks import task_api
from smart_todo.tasks.task_models import TaskFilter


def test_add_task_notifies_success(state, notifier) -> None:
    task = task_api.add_task(state, "Buy milk")

    assert task is not None
    assert notifier.last.severity is Severity.SUCCESS
    assert notifier.last.message == "Task added successfully!"


def test_add_blank_is_a_warning_not_a_crash(state, notifier) -> None:
    assert task_api.add_task(state, "   ") is None
    assert notifier.last.severity is Severity.WARNING
    assert notifier.last.message == "Please enter a task!"
    assert len(state.store) == 0


def test_toggle_messages_follow_new_flag(state, notifier) -> None:
    task = state.store.add("Buy milk")

    task_api.toggle_task(state, task.id)
    assert notifier.last.message == "Task completed!"

    task_api.toggle_task(state, task.id)
    assert notifier.last.message == "Task marked as pending"


def test_missing_id_is_reported_as_error(state, notifier, caplog) -> None:
    with caplog.at_level("WARNING", logger="smart_todo.tasks.task_api"):
        assert task_api.toggle_task(state, 99) is None
        assert task_api.delete_task(state, 99) is None

    assert notifier.severities() == [Severity.ERROR, Severity.ERROR]
    assert notifier.last.message == "Task 99 not found."
    assert "missing id=99" in caplog.text


def test_delete_task_is_immediate(state, notifier) -> None:
    task = state.store.add("Walk dog")

    assert task_api.delete_task(state, task.id) == task
    assert len(state.store) == 0
    assert notifier.last.severity is Severity.INFO
    assert notifier.last.message == "Task deleted!"


def test_clear_all_requires_confirmation(state, notifier) -> None:
    state.store.add("a")
    prompts: list[str] = []

    def say_no(prompt: str) -> bool:
        prompts.append(prompt)
        return False

    state.confirm = say_no
    assert task_api.clear_all_tasks(state) is False
    assert len(state.store) == 1
    assert prompts == [task_api.CLEAR_PROMPT]
    assert notifier.last.message == "Clear cancelled."

    state.confirm = lambda _prompt: True
    assert task_api.clear_all_tasks(state) is True
    assert len(state.store) == 0
    assert notifier.last.message == "All tasks cleared!"


def test_clear_all_confirmed_skips_prompt(state) -> None:
    state.store.add("a")
    def never(prompt: str) -> bool:
        raise AssertionError(f"unexpected prompt: {prompt}")

    state.confirm = never

    assert task_api.clear_all_tasks(state, confirmed=True) is True
    assert len(state.store) == 0


def test_set_filter(state, notifier) -> None:
    assert task_api.set_filter(state, "Completed") is TaskFilter.COMPLETED
    assert state.current_filter is TaskFilter.COMPLETED

    assert task_api.set_filter(state, "archived") is None
    assert state.current_filter is TaskFilter.COMPLETED
    assert notifier.last.severity is Severity.WARNING


def test_export_writes_full_sequence(state, notifier, settings) -> None:
    a = state.store.add("a")
    state.store.add("b")
    state.store.toggle(a.id)
    state.current_filter = TaskFilter.PENDING

    path = task_api.export_tasks(state)

    assert path == settings.export_dir / "todo-tasks.json"
    data = json.loads(path.read_text("utf-8"))
    assert [d["text"] for d in data] == ["b", "a"]
    assert data[1]["completed"] is True
    assert notifier.last.severity is Severity.SUCCESS
    assert not (settings.export_dir / "todo-tasks.tmp").exists()


def test_export_to_explicit_directory(state, tmp_path) -> None:
    state.store.add("a")
    path = task_api.export_tasks(state, tmp_path / "backup")
    assert path is not None and path.parent == tmp_path / "backup"
