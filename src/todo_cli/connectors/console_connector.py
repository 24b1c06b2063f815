# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandResult
from ..cli.commands import registry as command_registry
from ..core.errors import TaskStorageError
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
Write = Callable[[str], None]


def save_tasks(state: AppState, write: Write) -> None:
    """Persist the session collection; report a failure instead of raising."""
    try:
        state.store.save(state.tasks)
    except TaskStorageError as e:
        logger.info("Save failed: %s", e)
        write(f"Error saving tasks: {e}")


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: Write = print,
) -> None:
    """
    Read-dispatch-save loop.

    Each line is handled completely (including the save) before the next
    one is read. EOF and Ctrl+C act like the exit command.
    """
    prompt = str(getattr(state.settings, "prompt", "todo> "))
    logger.info("Console started (tasks=%d file=%s).", len(state.tasks), state.store.path)

    if getattr(state.settings, "show_help_on_start", True):
        write(command_registry.build_help())

    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            save_tasks(state, write)
            write("Goodbye!")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            save_tasks(state, write)
            write("Goodbye!")
            break

        try:
            result = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            result = CommandResult("Internal error while handling a command.")

        if result is None:
            continue

        if result.exit:
            save_tasks(state, write)
            write(result.message)
            break

        write(result.message)
        if result.changed:
            save_tasks(state, write)

    logger.info("Console finished.")
