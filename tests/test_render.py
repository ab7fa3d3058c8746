# tests/test_render.py

from __future__ import annotations

from todo_keeper.cli.render import column_widths, format_table
from todo_keeper.tasks.task_models import Task

from .conftest import START


def _tasks() -> list[Task]:
    return [
        Task(id=1, created_at=START, text="buy milk"),
        Task(id=10, created_at=START, text="x", is_completed=True),
    ]


def test_column_widths_follow_the_data() -> None:
    assert column_widths(_tasks()) == (2, 10, 8, 4)
    assert column_widths([]) == (0, 10, 0, 4)


def test_format_table_aligns_columns() -> None:
    assert format_table(_tasks()) == [
        "",
        " 1 01.03.2024 buy milk false",
        "10 01.03.2024 x        true",
        "",
    ]


def test_open_only_hides_completed_rows_but_keeps_widths() -> None:
    assert format_table(_tasks(), open_only=True) == [
        "",
        " 1 01.03.2024 buy milk false",
        "",
    ]


def test_empty_table_is_two_blank_lines() -> None:
    assert format_table([]) == ["", ""]
