# src/smart_todo/core/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task, TaskFilter, TaskStats


def render_stats(stats: TaskStats) -> str:
    plural = "" if stats.total == 1 else "s"
    return f"{stats.total} task{plural} · {stats.completed} completed"


def render_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id}  {task.text}"


def render_task_list(tasks: Sequence[Task], stats: TaskStats, task_filter: TaskFilter) -> str:
    """
    Full redraw of the current view: stats header, then the filtered tasks
    or an empty-state line.
    """
    lines = [f"{render_stats(stats)}  (filter: {task_filter.value})"]
    if not tasks:
        lines.append("  No tasks yet" if stats.total == 0 else "  No tasks in this view")
    else:
        lines.extend(f"  {render_task(t)}" for t in tasks)
    return "\n".join(lines)
