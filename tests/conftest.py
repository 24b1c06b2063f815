# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fakes import MemoryTaskStore

from todo_cli.core.state import AppState
from todo_cli.tasks.task_list import TaskList


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the console loop.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "logs",
        tasks_path=tmp_path / "tasks.json",
        prompt="todo> ",
        show_help_on_start=False,
    )


@pytest.fixture()
def store() -> MemoryTaskStore:
    return MemoryTaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: MemoryTaskStore) -> AppState:
    """AppState wired with an in-memory store and an empty task list."""
    return AppState(settings=settings, store=store, tasks=TaskList(store.load()))
