# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskStorage


@dataclass
class AppState:
    # Settings are kept on the state so handlers and the loop read one object.
    settings: object

    store: TaskStorage
    tasks: TaskList
