# src/todo_keeper/cli/render.py

from __future__ import annotations

from collections.abc import Sequence

from ..tasks.task_models import Task

DATE_FORMAT = "%d.%m.%Y"
DATE_WIDTH = 10
FLAG_WIDTH = 4


def column_widths(tasks: Sequence[Task]) -> tuple[int, int, int, int]:
    """
    (id, date, text, flag) widths.

    id and text widths come from the widest value in `tasks`; date and flag are fixed.
    Widths are minimums: "false" is still printed in full.
    """
    id_width = max((len(str(t.id)) for t in tasks), default=0)
    text_width = max((len(t.text) for t in tasks), default=0)
    return id_width, DATE_WIDTH, text_width, FLAG_WIDTH


def format_row(task: Task, widths: tuple[int, int, int, int]) -> str:
    id_w, date_w, text_w, flag_w = widths
    created = task.created_at.strftime(DATE_FORMAT)
    flag = "true" if task.is_completed else "false"
    return f"{task.id:>{id_w}} {created:>{date_w}} {task.text:<{text_w}} {flag:>{flag_w}}"


def format_table(tasks: Sequence[Task], open_only: bool = False) -> list[str]:
    """
    Render tasks as aligned rows, framed by a blank line on each side.

    Column widths are computed over all of `tasks`, so hiding completed
    rows does not shift the layout.
    """
    widths = column_widths(tasks)
    rows = [format_row(t, widths) for t in tasks if not (open_only and t.is_completed)]
    return ["", *rows, ""]
