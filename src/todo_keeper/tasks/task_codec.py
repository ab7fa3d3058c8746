# src/todo_keeper/tasks/task_codec.py

from __future__ import annotations

"""
Line codec for the todo file.

File layout:
    seq_id:<n>
    <id>,<created_at>,<text>,<is_completed>
    ...

Task lines are CSV records with minimal quoting: plain text is written bare,
text containing a comma or a double quote is wrapped in quotes with "" escaping.
Lines from older files that are not valid CSV are split on bare commas.
created_at is ISO-8601 local time with offset.
"""

import csv
import io
import re
from datetime import datetime

from .task_models import Task

SEQ_PREFIX = "seq_id:"
TASK_FIELDS = 4

_TRUE = "true"
_FALSE = "false"

# Older files carry nanosecond fractions; datetime keeps microseconds.
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")


class CodecError(ValueError):
    """A single line could not be decoded. The store adds path and line number."""


def _parse_uint(raw: str, what: str) -> int:
    if not raw or not raw.isascii() or not raw.isdigit():
        raise CodecError(f"{what} is not an unsigned integer: {raw!r}")
    return int(raw)


def format_metadata(seq_id: int) -> str:
    return f"{SEQ_PREFIX}{seq_id}"


def parse_metadata(line: str) -> int:
    s = line.strip()
    if not s.startswith(SEQ_PREFIX):
        raise CodecError(f"metadata line must start with {SEQ_PREFIX!r}")
    parts = s.split(":")
    if len(parts) != 2:
        raise CodecError("metadata line must contain exactly one ':'")
    return _parse_uint(parts[1], "seq_id")


def format_timestamp(dt: datetime) -> str:
    return dt.isoformat()


def parse_timestamp(raw: str) -> datetime:
    try:
        dt = datetime.fromisoformat(_LONG_FRACTION.sub(r"\1", raw))
    except ValueError:
        raise CodecError(f"unparsable timestamp: {raw!r}") from None
    if dt.tzinfo is None:
        raise CodecError(f"timestamp has no UTC offset: {raw!r}")
    return dt


def format_task(task: Task) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="")
    writer.writerow(
        [
            task.id,
            format_timestamp(task.created_at),
            task.text,
            _TRUE if task.is_completed else _FALSE,
        ]
    )
    return buf.getvalue()


def _split_fields(line: str) -> list[str]:
    """
    CSV first; lines that are not valid CSV with four fields are read the legacy way,
    a bare split on ",". Legacy text may start with a quote, e.g. `"urgent" call mom`.
    """
    try:
        rows = list(csv.reader([line], strict=True))
    except csv.Error:
        rows = []
    if rows and len(rows[0]) == TASK_FIELDS:
        return rows[0]
    if not line:
        return []
    return line.split(",")


def parse_task(line: str) -> Task:
    fields = _split_fields(line)
    if len(fields) != TASK_FIELDS:
        raise CodecError(f"expected {TASK_FIELDS} fields, got {len(fields)}")

    raw_id, raw_ts, text, raw_done = fields
    if raw_done == _TRUE:
        is_completed = True
    elif raw_done == _FALSE:
        is_completed = False
    else:
        raise CodecError(f"completion flag must be 'true' or 'false': {raw_done!r}")

    return Task(
        id=_parse_uint(raw_id, "id"),
        created_at=parse_timestamp(raw_ts),
        text=text,
        is_completed=is_completed,
    )


def dumps(seq_id: int, tasks: list[Task]) -> str:
    lines = [format_metadata(seq_id)]
    lines.extend(format_task(t) for t in tasks)
    return "\n".join(lines) + "\n"
