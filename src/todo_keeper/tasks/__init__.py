"""
Task subsystem.

Components:
- task_models.py: Task dataclass and the error hierarchy
- task_codec.py: line format of the todo file (metadata + CSV task records)
- task_store.py: TodoStore, the in-memory collection with load/save
"""
