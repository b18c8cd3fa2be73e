# src/smart_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs the interactive console (no arguments), or
- runs the arguments as a single command line and exits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import run_line
from ..config import get_settings
from ..connectors.console_connector import ConsoleNotifier, make_console_confirm, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    notifier = ConsoleNotifier()
    state = create_initial_state(
        settings=settings,
        notifier=notifier,
        confirm=make_console_confirm(),
    )

    if argv:
        try:
            reply = run_line(state, " ".join(argv))
        except Exception:
            logger.exception("Command failed: %s", argv)
            return 1
        if reply:
            print(reply)
        return 1 if notifier.had_error() else 0

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
