# src/smart_todo/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.notifications import Severity
from ..core.render import render_stats, render_task_list
from ..core.state import AppState
from ..tasks import task_api

CommandHandler = Callable[[AppState, list[str]], str | None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        raw: bool = False,
    ) -> None:
        """raw=True passes everything after the command name as one untouched argument."""
        aliases = aliases or []
        key = name.lower()
        names = [key, *(a.lower() for a in aliases)]
        self._help[key] = help_text
        for n in names:
            self._handlers[n] = handler
            if raw:
                self._raw.add(n)

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string, "" if the command has nothing to print,
        or None if the line is not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        if name in self._raw:
            args = line[1:].split(None, 1)[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        logger.debug("Command /%s args=%s", name, args)
        return handler(state, args) or ""

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Any other text is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def run_line(state: AppState, line: str) -> str | None:
    """Commands go to the registry; plain text becomes a new task."""
    line = line.strip()
    reply = registry.handle(state, line)
    if reply is not None:
        return reply
    return cmd_add(state, [line])


def _view(state: AppState) -> str:
    tasks = state.store.filtered_view(state.current_filter)
    return render_task_list(tasks, state.store.stats(), state.current_filter)


def _parse_id(state: AppState, args: list[str], usage: str) -> int | None:
    if len(args) != 1:
        state.notify(f"Usage: {usage}", Severity.WARNING)
        return None
    try:
        return int(args[0])
    except ValueError:
        state.notify(f"Not a task id: {args[0]!r}. Usage: {usage}", Severity.WARNING)
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str | None:
    task = task_api.add_task(state, " ".join(args))
    return _view(state) if task is not None else None


def cmd_done(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(state, args, "/done <id>")
    if task_id is None:
        return None
    task = task_api.toggle_task(state, task_id)
    return _view(state) if task is not None else None


def cmd_delete(state: AppState, args: list[str]) -> str | None:
    task_id = _parse_id(state, args, "/del <id>")
    if task_id is None:
        return None
    task = task_api.delete_task(state, task_id)
    return _view(state) if task is not None else None


def cmd_list(state: AppState, args: list[str]) -> str | None:
    """
    /list               -> current view
    /list completed     -> switch filter, then show
    """
    if args and task_api.set_filter(state, args[0]) is None:
        return None
    return _view(state)


def cmd_filter(state: AppState, args: list[str]) -> str | None:
    if not args:
        return f"Current filter: {state.current_filter.value}. Use /filter all|completed|pending."
    if task_api.set_filter(state, args[0]) is None:
        return None
    return _view(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_stats(state.store.stats())


def cmd_clear(state: AppState, args: list[str]) -> str | None:
    """
    /clear       -> ask for confirmation, then clear
    /clear yes   -> clear without asking
    """
    confirmed = bool(args) and args[0].lower() in ("yes", "y", "-y", "--yes")
    if not task_api.clear_all_tasks(state, confirmed=confirmed):
        return None
    return _view(state)


def cmd_export(state: AppState, args: list[str]) -> None:
    task_api.export_tasks(state, args[0].strip() if args else None)


def cmd_ideas(state: AppState, args: list[str]) -> str | None:
    """
    /ideas     -> list recommended tasks
    /ideas 2   -> add recommended task #2
    """
    ideas = list(getattr(state.settings, "recommended_tasks", []) or [])
    if not ideas:
        return "No recommended tasks configured."

    if not args:
        lines = ["Recommended tasks (add one with /ideas <n>):"]
        for i, text in enumerate(ideas, start=1):
            lines.append(f"  {i}. {text}")
        return "\n".join(lines)

    try:
        n = int(args[0])
    except ValueError:
        n = 0
    if not 1 <= n <= len(ideas):
        state.notify(f"Pick a number between 1 and {len(ideas)}.", Severity.WARNING)
        return None
    return cmd_add(state, [ideas[n - 1]])


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"], raw=True)
registry.register("done", cmd_done, help_text="Toggle completed/pending: /done <id>.", aliases=["toggle"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["delete", "rm"])
registry.register("list", cmd_list, help_text="Show tasks: /list [all|completed|pending].", aliases=["ls"])
registry.register("filter", cmd_filter, help_text="Set the view: /filter all|completed|pending.")
registry.register("stats", cmd_stats, help_text="Show task totals.")
registry.register("clear", cmd_clear, help_text="Delete all tasks (asks first; /clear yes skips).")
registry.register("export", cmd_export, help_text="Write todo-tasks.json: /export [dir].", raw=True)
registry.register("ideas", cmd_ideas, help_text="Recommended tasks: /ideas | /ideas <n>.")
