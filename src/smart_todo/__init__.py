"""smart-todo: a local task list with a persistent, newest-first TaskStore."""

__version__ = "0.1.0"
