# src/todo_keeper/cli/menu.py

from __future__ import annotations

from enum import StrEnum


class MenuCommand(StrEnum):
    """
    Numbered menu entries.

    Only "1".."5" select an action. Everything else, including "6",
    an empty line or garbage, means CLOSE (save and exit).
    """

    SHOW_ALL = "1"
    SHOW_OPEN = "2"
    CREATE = "3"
    COMPLETE = "4"
    DELETE = "5"
    CLOSE = "6"

    @classmethod
    def parse(cls, raw: str | None) -> MenuCommand:
        if raw is None:
            return cls.CLOSE
        try:
            return cls(raw.strip())
        except ValueError:
            return cls.CLOSE


MENU_LABELS: dict[MenuCommand, str] = {
    MenuCommand.SHOW_ALL: "Show all todos",
    MenuCommand.SHOW_OPEN: "Show all open todos",
    MenuCommand.CREATE: "Create a new todo",
    MenuCommand.COMPLETE: "Set a todo as complete",
    MenuCommand.DELETE: "Delete a todo",
    MenuCommand.CLOSE: "Close",
}


def build_menu() -> str:
    lines = ["What do you want to do?"]
    for cmd in MenuCommand:
        lines.append(f"[{cmd.value}] {MENU_LABELS[cmd]}")
    return "\n".join(lines)
