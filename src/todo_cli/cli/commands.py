# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import TodoError, UnknownCommandError, UsageError
from ..core.state import AppState
from ..tasks.task_list import format_task_list

logger = logging.getLogger(__name__)

_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(slots=True)
class CommandResult:
    """
    Outcome of one command line.

    message  -> text for the user (may be multi-line)
    error    -> the TodoError that made the command fail, None on success
    changed  -> the task collection was modified and should be saved
    exit     -> the loop should save and stop
    """

    message: str
    error: TodoError | None = None
    changed: bool = False
    exit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, exc: TodoError) -> CommandResult:
        text = f"Error: {exc}" if isinstance(exc, UsageError) else str(exc)
        return cls(message=text, error=exc)


CommandHandler = Callable[[AppState, list[str]], CommandResult]


class CommandRegistry:
    """Command registry used by the console loop (add, list, help, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> CommandResult | None:
        """
        Handle a line like "add buy milk".
        Returns None for a blank line, otherwise a CommandResult.
        Expected failures come back as a result with .error set.
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0]
        args = parts[1:]

        handler = self._handlers.get(name.lower())
        try:
            if handler is None:
                raise UnknownCommandError(name)
            return handler(state, args)
        except TodoError as e:
            logger.debug("Command %r failed: %s", name, e)
            return CommandResult.failure(e)

    def build_help(self) -> str:
        width = max((len(usage) for usage, _ in self._help.values()), default=0)
        lines = ["Commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage.ljust(width)}  - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str]) -> int:
    if len(args) != 1:
        raise UsageError("Please provide a task ID")
    raw = args[0]
    if not _TASK_ID_RE.fullmatch(raw):
        raise UsageError(f"Invalid task ID: {raw}")
    try:
        return int(raw)
    except ValueError as e:
        # more digits than int() will convert
        raise UsageError(f"Invalid task ID: {raw}") from e


def cmd_add(state: AppState, args: list[str]) -> CommandResult:
    if not args:
        raise UsageError("Please provide a task description")
    task = state.tasks.add(" ".join(args))
    logger.info("Added task id=%s", task.id)
    return CommandResult(f"Added task: {task.description}", changed=True)


def cmd_list(state: AppState, args: list[str]) -> CommandResult:
    return CommandResult(format_task_list(state.tasks))


def cmd_complete(state: AppState, args: list[str]) -> CommandResult:
    task_id = _parse_task_id(args)
    task = state.tasks.complete(task_id)
    logger.info("Completed task id=%s", task.id)
    return CommandResult(f"Marked task {task.id} as complete: {task.description}", changed=True)


def cmd_delete(state: AppState, args: list[str]) -> CommandResult:
    task_id = _parse_task_id(args)
    task = state.tasks.delete(task_id)
    logger.info("Deleted task id=%s", task.id)
    return CommandResult(f"Deleted task: {task.description}", changed=True)


def cmd_help(state: AppState, args: list[str]) -> CommandResult:
    return CommandResult(registry.build_help())


def cmd_exit(state: AppState, args: list[str]) -> CommandResult:
    return CommandResult("Goodbye!", exit=True)


registry.register("add", cmd_add, help_text="Add a new task", usage="add <description>")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register(
    "complete", cmd_complete, help_text="Mark a task as complete", usage="complete <id>"
)
registry.register("delete", cmd_delete, help_text="Delete a task", usage="delete <id>")
registry.register("help", cmd_help, help_text="Show this help message", aliases=["h", "?"])
registry.register("exit", cmd_exit, help_text="Save and exit the program", aliases=["quit"])
