# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command loop.

The loop depends on a Protocol instead of the concrete JSON store,
so tests can swap in an in-memory store (or one that fails on save).
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    @property
    def path(self) -> Path: ...

    def load(self) -> list[Task]: ...
    def save(self, tasks: Iterable[Task]) -> None: ...
