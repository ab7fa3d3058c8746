# tests/conftest.py

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from todo_keeper.config import Settings
from todo_keeper.tasks.task_store import TodoStore

TZ = timezone(timedelta(hours=1))
START = datetime(2024, 3, 1, 9, 15, 2, 123456, tzinfo=TZ)


@pytest.fixture()
def clock() -> Callable[[], datetime]:
    """Deterministic clock: each call is one minute after the previous one."""
    ticks = {"n": 0}

    def _now() -> datetime:
        value = START + timedelta(minutes=ticks["n"])
        ticks["n"] += 1
        return value

    return _now


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "todos_db.txt"


@pytest.fixture()
def store(db_path: Path, clock) -> TodoStore:
    """Empty store bound to a (not yet existing) file under tmp_path."""
    return TodoStore(db_path, clock=clock)


@pytest.fixture()
def settings(tmp_path: Path, db_path: Path) -> Settings:
    """
    Settings built directly, not from env,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="todo-test",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "data",
        db_path=db_path,
        create_if_missing=True,
    )
