# src/todolist/cli/main.py

"""
CLI entrypoint.

One invocation runs one command: load the task file, dispatch, save if the
command mutates, print the result, exit.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import SettingsLike, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore
from .commands import build_registry
from .formatting import NO_SAVED_TASKS

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1


def main(argv: Sequence[str] | None = None, *, settings: SettingsLike | None = None) -> int:
    if settings is None:
        settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = settings.log_level.upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=settings.log_file)

    # Undecodable bytes from the task file are carried as surrogates; echo them back unchanged.
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")

    store = TaskStore(settings.tasks_file)
    if not store.load():
        print(NO_SAVED_TASKS)

    registry = build_registry(settings.app_name)

    args = list(argv)
    if not args:
        print(registry.build_usage())
        return EXIT_USAGE

    reply = registry.handle(store, args)
    if reply is not None:
        print(reply)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
