"""
Task subsystem.

Components:
- task_models.py: data structures (Task variants, TaskKind, date/time format)
- task_list.py: ordered in-memory list the commands operate on
- task_store.py: SQLite-backed persistence of the list
"""
