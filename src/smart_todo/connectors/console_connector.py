# src/smart_todo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import run_line
from ..core.notifications import Notification, Severity
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleNotifier:
    """Prints notifications as timestamped lines; remembers the last severity."""

    def __init__(self, out: PrintFn = print) -> None:
        self._out = out
        self.last: Notification | None = None

    def notify(self, notification: Notification) -> None:
        self.last = notification
        self._out(f"[{_ts_local()}] {notification}")

    def had_error(self) -> bool:
        return self.last is not None and self.last.severity is Severity.ERROR


def make_console_confirm(read: InputFn = input) -> Callable[[str], bool]:
    def confirm(prompt: str) -> bool:
        try:
            answer = read(f"{prompt} [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def run_console_loop(state: AppState, *, read: InputFn = input, out: PrintFn = print) -> None:
    logger.info("Console connector started.")
    out(f"[{_ts_local()}] Type a task to add it. Use /help for commands. Use /exit to quit.\n")

    reply = run_line(state, "/list")
    if reply:
        out(reply)

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = run_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            state.notify("Internal error while handling a command.", Severity.ERROR)
            continue

        if reply:
            out(reply)

    logger.info("Console connector finished.")
