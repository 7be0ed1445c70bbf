# src/todolist/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .formatting import INVALID_COMMAND, INVALID_INDEX, format_task_list

CommandHandler = Callable[[TaskStore, list[str]], str | None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    usage: str
    needs_payload: bool = False
    mutates: bool = False


class CommandRegistry:
    """
    Command table for the `todo` executable.

    Lookup is an exact string match on the first argument. Commands flagged
    `mutates` are saved after they run, whether or not they changed anything.
    """

    def __init__(self, app_name: str = "todo") -> None:
        self.app_name = app_name
        self._commands: dict[str, Command] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        usage: str = "",
        needs_payload: bool = False,
        mutates: bool = False,
    ) -> None:
        self._commands[name] = Command(
            name=name,
            handler=handler,
            help_text=help_text,
            usage=usage or name,
            needs_payload=needs_payload,
            mutates=mutates,
        )

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def handle(self, store: TaskStore, args: list[str]) -> str | None:
        """
        Run `args[0]` with `args[1:]` as payload.
        Returns the text to print, or None when there is nothing to say.
        """
        if not args:
            return INVALID_COMMAND

        name, payload = args[0], args[1:]
        command = self._commands.get(name)
        if command is None or (command.needs_payload and not payload):
            logger.debug("Rejected command %r (payload=%d args)", name, len(payload))
            return INVALID_COMMAND

        logger.debug("Dispatching %s", name)
        reply = command.handler(store, payload)
        if command.mutates:
            store.save()
        return reply

    def build_usage(self) -> str:
        lines = [f"Usage: {self.app_name} [COMMAND] [ARGUMENTS]", "", "Commands:"]
        width = max((len(c.usage) for c in self._commands.values()), default=0)
        for command in self._commands.values():
            lines.append(f"  {command.usage.ljust(width)}  {command.help_text}")
        return "\n".join(lines)


def parse_index(raw: str) -> int | None:
    """Parse a 1-based task index; None unless `raw` is plain ASCII digits."""
    text = raw.strip()
    if not (text.isascii() and text.isdecimal()):
        return None
    return int(text)


def cmd_list(store: TaskStore, args: list[str]) -> str:
    return format_task_list(store)


def cmd_add(store: TaskStore, args: list[str]) -> None:
    store.add(" ".join(args))


def cmd_remove(store: TaskStore, args: list[str]) -> str | None:
    index = parse_index(args[0])
    if index is None or not store.remove(index):
        return INVALID_INDEX
    return None


def cmd_done(store: TaskStore, args: list[str]) -> str | None:
    index = parse_index(args[0])
    if index is None or not store.mark_done(index):
        return INVALID_INDEX
    return None


def cmd_reset(store: TaskStore, args: list[str]) -> None:
    store.reset()


def build_registry(app_name: str = "todo") -> CommandRegistry:
    reg = CommandRegistry(app_name)
    reg.register("list", cmd_list, help_text="Show all tasks.")
    reg.register(
        "add",
        cmd_add,
        help_text="Append a task; extra words are joined with spaces.",
        usage="add <text...>",
        needs_payload=True,
        mutates=True,
    )
    reg.register(
        "remove",
        cmd_remove,
        help_text="Delete the task at a 1-based index.",
        usage="remove <index>",
        needs_payload=True,
        mutates=True,
    )
    reg.register(
        "done",
        cmd_done,
        help_text="Mark the task at a 1-based index as completed.",
        usage="done <index>",
        needs_payload=True,
        mutates=True,
    )
    reg.register("reset", cmd_reset, help_text="Delete all tasks.", mutates=True)
    return reg

