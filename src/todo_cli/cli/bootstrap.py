# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the task store for the configured file,
- loads the collection and wires it into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskStorage
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, store: TaskStorage | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and store are injectable for tests; they default to
    get_settings() and a JsonTaskStore on settings.tasks_path.

    Load errors (MalformedDataError, TaskStorageError) propagate: the caller
    must not start a session on top of a file it could not read.
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        store = JsonTaskStore(settings.tasks_path)

    tasks = TaskList(store.load())
    logger.info("Loaded %d tasks from %s", len(tasks), store.path)

    return AppState(settings=settings, store=store, tasks=tasks)
