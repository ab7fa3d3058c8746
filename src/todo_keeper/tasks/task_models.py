# src/todo_keeper/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(slots=True)
class Task:
    id: int
    created_at: datetime
    text: str
    is_completed: bool = False

    @property
    def is_open(self) -> bool:
        return not self.is_completed


class TodoError(Exception):
    """Base class for all todo-keeper errors."""


class StoreError(TodoError):
    def __init__(self, path: str | Path, message: str) -> None:
        super().__init__(message)
        self.path = Path(path)


class StoreFileMissingError(StoreError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path, f"todo file not found: {path}")


class CorruptStoreError(StoreError):
    """
    The file exists but cannot be trusted.

    line_no is 1-based; line 1 is the metadata line.
    """

    def __init__(self, path: str | Path, line_no: int, reason: str) -> None:
        super().__init__(path, f"{path}:{line_no}: {reason}")
        self.line_no = line_no
        self.reason = reason


class TaskNotFoundError(TodoError, LookupError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"no todo with id {task_id}")
        self.task_id = task_id


class InvalidTaskIdError(TodoError, ValueError):
    def __init__(self, raw: str) -> None:
        super().__init__(f"not a valid todo id: {raw!r}")
        self.raw = raw


def parse_task_id(raw: str) -> int:
    """Parse a user-typed id. Only plain non-negative decimal integers are accepted."""
    s = raw.strip()
    if not s.isdigit() or not s.isascii():
        raise InvalidTaskIdError(raw)
    return int(s)
