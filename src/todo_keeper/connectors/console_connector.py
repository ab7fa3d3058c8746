# src/todo_keeper/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.menu import MenuCommand, build_menu
from ..cli.render import format_table
from ..core.ports import TodoRepo
from ..tasks.task_models import TaskNotFoundError, parse_task_id

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]

NOT_FOUND_MESSAGE = "Could not find Todo by that id"


def _show(store: TodoRepo, write: Write, *, open_only: bool) -> None:
    for line in format_table(store.list_tasks(), open_only=open_only):
        write(line)


def _read_id(read_line: ReadLine) -> int:
    # InvalidTaskIdError is not handled here: a non-numeric id ends the session.
    return parse_task_id(read_line("Todo id: "))


def handle_command(
    store: TodoRepo,
    cmd: MenuCommand,
    *,
    read_line: ReadLine,
    write: Write,
) -> bool:
    """
    Run one menu action. Returns False when the loop should stop.

    CLOSE saves the store before returning.
    """
    if cmd is MenuCommand.SHOW_ALL:
        _show(store, write, open_only=False)
    elif cmd is MenuCommand.SHOW_OPEN:
        _show(store, write, open_only=True)
    elif cmd is MenuCommand.CREATE:
        task = store.create(read_line("Todo text: "))
        logger.info("Created todo id=%s", task.id)
    elif cmd is MenuCommand.COMPLETE:
        task_id = _read_id(read_line)
        try:
            store.complete(task_id)
        except TaskNotFoundError:
            write(NOT_FOUND_MESSAGE)
    elif cmd is MenuCommand.DELETE:
        task_id = _read_id(read_line)
        try:
            store.delete(task_id)
        except TaskNotFoundError:
            write(NOT_FOUND_MESSAGE)
    else:
        store.save()
        return False
    return True


def run_menu_loop(
    store: TodoRepo,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> None:
    """
    Interactive menu: one line of input per prompt, blocking.

    EOF or Ctrl+C at any prompt behaves like choosing Close.
    """
    logger.info("Console menu started.")

    running = True
    while running:
        write(build_menu())
        try:
            cmd = MenuCommand.parse(read_line(">> "))
            running = handle_command(store, cmd, read_line=read_line, write=write)
        except (EOFError, KeyboardInterrupt) as e:
            logger.info("Console %s received, saving and exiting.", type(e).__name__)
            write("")
            running = handle_command(store, MenuCommand.CLOSE, read_line=read_line, write=write)

    logger.info("Console menu finished.")
