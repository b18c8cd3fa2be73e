# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: smart-todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/smart_todo.log (true/false, default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/smart_todo).",
    "TODO_DB_PATH": "SQLite slot storage path (default: <data_dir>/todo.sqlite3).",
    "TODO_EXPORT_DIR": "Where /export writes todo-tasks.json (default: current directory).",
    # Storage
    "TODO_SLOT_KEY": "Slot name holding the task list (default: tasks).",
    # Presentation
    "TODO_RECOMMENDED_TASKS": "'|'-separated task suggestions shown by /ideas.",
}
