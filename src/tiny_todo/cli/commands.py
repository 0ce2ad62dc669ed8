# src/tiny_todo/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_file import TaskFile
from ..tasks.task_store import add_task, mark_done, remove_task

CommandHandler = Callable[[TaskFile, argparse.Namespace], str]
ArgsConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    configure: ArgsConfigurer | None = None


class CommandRegistry:
    """Subcommand registry: builds the argparse subparsers and dispatches by name."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgsConfigurer | None = None,
    ) -> None:
        key = name.lower()
        self._commands[key] = Command(key, handler, help_text, configure)

    def names(self) -> list[str]:
        return list(self._commands)

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="command", metavar="COMMAND")
        for cmd in self._commands.values():
            p = sub.add_parser(cmd.name, help=cmd.help_text, description=cmd.help_text)
            if cmd.configure is not None:
                cmd.configure(p)

    def handle(self, storage: TaskFile, args: argparse.Namespace) -> str:
        """
        Run the command named by args.command against storage.
        Returns the text to print. OSError from storage propagates.
        """
        name = str(getattr(args, "command", "") or "").lower()
        cmd = self._commands.get(name)
        if cmd is None:
            return f"Unknown command: {name}. Use --help to list available commands."
        logger.debug("Running command %s", name)
        return cmd.handler(storage, args)


registry = CommandRegistry()


def task_id_arg(raw: str) -> int:
    """argparse type for task ids: a non-negative decimal integer."""
    try:
        value = int(raw, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}")
    return value


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("text", nargs="+", help="task text (words are joined with spaces)")


def _configure_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=task_id_arg, help="task id")


def _not_found(task_id: int) -> str:
    return f"Task {task_id} not found."


def cmd_add(storage: TaskFile, args: argparse.Namespace) -> str:
    text = " ".join(args.text)
    tasks = storage.load()
    task = add_task(tasks, text)
    storage.save(tasks)
    return f"Added task {task.id}: {task.text}"


def cmd_list(storage: TaskFile, args: argparse.Namespace) -> str:
    tasks = storage.load()
    if not tasks:
        return "No tasks yet."
    lines = []
    for t in tasks:
        mark = "x" if t.done else " "
        lines.append(f"{t.id} [{mark}] {t.text}")
    return "\n".join(lines)


def cmd_done(storage: TaskFile, args: argparse.Namespace) -> str:
    tasks = storage.load()
    if not mark_done(tasks, args.id):
        return _not_found(args.id)
    storage.save(tasks)
    return f"Marked {args.id} done."


def cmd_rm(storage: TaskFile, args: argparse.Namespace) -> str:
    tasks = storage.load()
    if not remove_task(tasks, args.id):
        return _not_found(args.id)
    storage.save(tasks)
    return f"Removed {args.id}."


registry.register("add", cmd_add, help_text="Add a task.", configure=_configure_add)
registry.register("list", cmd_list, help_text="List all tasks.")
registry.register("done", cmd_done, help_text="Mark a task as done.", configure=_configure_id)
registry.register("rm", cmd_rm, help_text="Remove a task.", configure=_configure_id)
