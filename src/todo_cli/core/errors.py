# src/todo_cli/core/errors.py

"""
Error types shared by storage, the task list and the command layer.

Everything raised on purpose derives from TodoError, so the console loop can
report it and keep going while unexpected exceptions still surface as crashes.
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for expected, user-reportable failures."""


class MalformedDataError(TodoError):
    """The persisted task file exists but does not hold a task list."""


class TaskStorageError(TodoError):
    """Reading or writing the task file failed at the OS level."""


class TaskNotFoundError(TodoError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


class UsageError(TodoError):
    """Missing or invalid command arguments."""


class UnknownCommandError(TodoError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name}\nType 'help' for usage information")
        self.name = name
