# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the todo file, runs the console menu.
The menu saves the file itself when the user closes it.
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

from ..cli.bootstrap import open_store
from ..config import get_settings
from ..connectors.console_connector import run_menu_loop
from ..logging_setup import setup_logging
from ..tasks.task_models import InvalidTaskIdError, StoreError, StoreFileMissingError

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    print(f"error: {message}", file=sys.stderr)
    raise SystemExit(1)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    log_dir = settings.data_dir if settings.log_to_file else None
    try:
        setup_logging(log_dir=log_dir, console_level=console_level)
    except OSError as e:
        _fail(f"cannot open log file in {log_dir}: {e.strerror or e}")

    logger.info("Starting %s (db=%s)...", settings.app_name, settings.db_path)

    try:
        store = open_store(settings=settings)
    except StoreFileMissingError as e:
        logger.error("%s", e)
        _fail(f"{e} (set TODO_CREATE_IF_MISSING=true to start a new list)")
    except StoreError as e:
        logger.error("Refusing to start, todo file is unusable: %s", e)
        _fail(str(e))

    try:
        run_menu_loop(store)
    except InvalidTaskIdError as e:
        # Session changes are not saved.
        logger.error("Aborting: %s", e)
        _fail(str(e))
    except StoreError as e:
        logger.exception("Saving failed.")
        _fail(str(e))

    logger.info("Bye.")


if __name__ == "__main__":
    main()
