# src/tiny_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task file from settings, runs one command and
prints its result. Exit codes: 0 ok (including "not found"), 1 storage
failure or no id left for a new task, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_file import TaskFile, TaskFileCorruptError
from ..tasks.task_store import TaskIdExhaustedError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STORAGE_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo", description="Tiny CLI todo app")
    registry.add_subparsers(parser)
    return parser


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    """
    Run one command. Settings are injectable for tests;
    if settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    storage = TaskFile(settings.data_file, strict=bool(getattr(settings, "strict_load", False)))

    try:
        output = registry.handle(storage, args)
    except (OSError, TaskFileCorruptError, TaskIdExhaustedError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_STORAGE_ERROR

    print(output)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
