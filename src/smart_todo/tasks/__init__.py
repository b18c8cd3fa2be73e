"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter, TaskStats)
- errors.py: recoverable store errors
- task_codec.py: JSON encoding for the persistent slot and exports
- id_gen.py: collision-free millisecond ids
- slot_storage.py: SQLite key-value slots
- task_store.py: the TaskStore itself
- task_api.py: small high-level helpers used by the presentation layer
"""
