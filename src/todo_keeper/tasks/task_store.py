# src/todo_keeper/tasks/task_store.py

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from . import task_codec
from .task_codec import CodecError
from .task_models import (
    CorruptStoreError,
    StoreError,
    StoreFileMissingError,
    Task,
    TaskNotFoundError,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_NO_PATH = "<memory>"


def local_now() -> datetime:
    return datetime.now().astimezone()


def _split_records(text: str) -> list[str]:
    # Only "\n" ends a record; other Unicode line breaks may appear inside task text.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.rstrip("\r") for line in lines]


class TodoStore:
    """
    In-memory todo collection plus its flat-file persistence.

    State:
    - seq_id: last id handed out; never decreases
    - tasks: insertion-ordered list, owned exclusively by the store

    Invariants:
    - every task id is <= seq_id
    - ids are unique for the lifetime of the store (deleted ids are not reused)

    The file is always read and written in full. A store built without a path
    works purely in memory; save() then raises StoreError.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        seq_id: int = 0,
        tasks: list[Task] | None = None,
        clock: Clock | None = None,
    ) -> None:
        if seq_id < 0:
            raise ValueError("seq_id must be >= 0")
        self._path = Path(path) if path is not None else None
        self._seq_id = seq_id
        self._tasks: list[Task] = list(tasks or [])
        self._clock: Clock = clock or local_now

    # ---- loading ----

    @classmethod
    def load(
        cls,
        path: str | Path,
        *,
        create_if_missing: bool = False,
        clock: Clock | None = None,
    ) -> TodoStore:
        """
        Read the whole file.

        - file absent -> StoreFileMissingError, or an empty store (seq_id 0)
          when create_if_missing is set; nothing is written until save()
        - file present but invalid -> CorruptStoreError with the offending line
        """
        path = Path(path)
        try:
            text = path.read_text("utf-8")
        except FileNotFoundError:
            if not create_if_missing:
                raise StoreFileMissingError(path) from None
            logger.info("Todo file %s not found, starting with an empty list.", path)
            return cls(path, clock=clock)
        except UnicodeDecodeError as e:
            raise StoreError(path, f"{path}: not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise StoreError(path, f"cannot read {path}: {e.strerror or e}") from e

        store = cls.loads(text, path=path, clock=clock)
        logger.info("Loaded %d todos from %s (seq_id=%d)", len(store), path, store.seq_id)
        return store

    @classmethod
    def loads(
        cls,
        text: str,
        *,
        path: str | Path | None = None,
        clock: Clock | None = None,
    ) -> TodoStore:
        where = path if path is not None else _NO_PATH
        lines = _split_records(text)
        if not lines:
            raise CorruptStoreError(where, 1, "missing metadata line")

        try:
            seq_id = task_codec.parse_metadata(lines[0])
        except CodecError as e:
            raise CorruptStoreError(where, 1, str(e)) from None

        tasks: list[Task] = []
        seen: set[int] = set()
        for line_no, line in enumerate(lines[1:], start=2):
            try:
                task = task_codec.parse_task(line)
            except CodecError as e:
                raise CorruptStoreError(where, line_no, str(e)) from None
            if task.id in seen:
                raise CorruptStoreError(where, line_no, f"duplicate id {task.id}")
            if task.id > seq_id:
                raise CorruptStoreError(
                    where, line_no, f"id {task.id} is above seq_id {seq_id}"
                )
            seen.add(task.id)
            tasks.append(task)

        return cls(path, seq_id=seq_id, tasks=tasks, clock=clock)

    # ---- saving ----

    def dumps(self) -> str:
        return task_codec.dumps(self._seq_id, self._tasks)

    def save(self) -> None:
        """Replace the file with the full current state."""
        if self._path is None:
            raise StoreError(_NO_PATH, "store has no file path")
        path = self._path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp = path.with_suffix(path.suffix + ".tmp")
            tmp.write_text(self.dumps(), "utf-8", newline="\n")
            os.replace(tmp, path)
        except OSError as e:
            raise StoreError(path, f"cannot write {path}: {e.strerror or e}") from e
        logger.info("Saved %d todos to %s (seq_id=%d)", len(self._tasks), path, self._seq_id)

    # ---- public API ----

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def seq_id(self) -> int:
        return self._seq_id

    def __len__(self) -> int:
        return len(self._tasks)

    def create(self, text: str) -> Task:
        text = text.strip()
        if "\n" in text or "\r" in text:
            raise ValueError("todo text must be a single line")

        self._seq_id += 1
        task = Task(id=self._seq_id, created_at=self._clock(), text=text)
        self._tasks.append(task)
        logger.debug("Todo created id=%s", task.id)
        return task

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def complete(self, task_id: int) -> Task:
        task = self.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.is_completed = True
        logger.debug("Todo completed id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                logger.debug("Todo deleted id=%s", task_id)
                return task
        raise TaskNotFoundError(task_id)

    def list_tasks(self, open_only: bool = False) -> list[Task]:
        if open_only:
            return [t for t in self._tasks if t.is_open]
        return list(self._tasks)
