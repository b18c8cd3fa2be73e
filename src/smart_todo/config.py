# src/smart_todo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every variable has a default.
- Components receive settings explicitly (tests pass a SimpleNamespace).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

DEFAULT_RECOMMENDED_TASKS = [
    "Drink a glass of water",
    "Take a 10-minute walk",
    "Review today's calendar",
    "Read for 20 minutes",
    "Plan tomorrow's top 3 tasks",
]


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: list[str], *, sep: str = "|") -> list[str]:
    # Task texts contain spaces and commas, so the separator is "|".
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(sep) if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path
    export_dir: Path

    # ---- Storage ----
    slot_key: str

    # ---- Presentation ----
    recommended_tasks: list[str]

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "smart-todo").strip() or "smart-todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/smart_todo"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "todo.sqlite3")
        export_dir = _env_path(_k("EXPORT_DIR"), Path("."))

        slot_key = _env(_k("SLOT_KEY"), "tasks").strip() or "tasks"

        recommended_tasks = _env_list(_k("RECOMMENDED_TASKS"), DEFAULT_RECOMMENDED_TASKS)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            db_path=db_path,
            export_dir=export_dir,
            slot_key=slot_key,
            recommended_tasks=recommended_tasks,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
