# src/todo_keeper/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the TodoStore from the configured file.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..tasks.task_models import StoreError
from ..tasks.task_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    dirs = [settings.db_path.parent]
    if settings.log_to_file:
        dirs.append(settings.data_dir)
    for d in dirs:
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(d, f"cannot create directory {d}: {e.strerror or e}") from e


def open_store(*, settings: Settings | None = None) -> TodoStore:
    """
    Load the store from settings.db_path.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    return TodoStore.load(settings.db_path, create_if_missing=settings.create_if_missing)
