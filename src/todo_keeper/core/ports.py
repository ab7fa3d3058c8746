# src/todo_keeper/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presentation layer.

Connectors depend on this Protocol instead of TodoStore directly,
so tests can drive the menu loop with any object that behaves like a store.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TodoRepo(Protocol):
    """Task collection with id allocation and whole-file persistence."""

    def create(self, text: str) -> Task: ...
    def complete(self, task_id: int) -> Task: ...
    def delete(self, task_id: int) -> Task: ...
    def list_tasks(self, open_only: bool = False) -> list[Task]: ...
    def save(self) -> None: ...
