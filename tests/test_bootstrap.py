# tests/test_bootstrap.py

from __future__ import annotations

import dataclasses
import io
import logging
from pathlib import Path

import pytest

from todo_cli.cli import main as cli_main
from todo_cli.cli.bootstrap import create_initial_state
from todo_cli.config import Settings
from todo_cli.core.errors import MalformedDataError
from todo_cli.tasks.task_models import Task
from todo_cli.tasks.task_store import JsonTaskStore


@pytest.fixture(autouse=True)
def _restore_root_logging():
    # main() reconfigures the root logger; put pytest's handlers back afterwards.
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


@pytest.fixture()
def real_settings(tmp_path: Path, monkeypatch) -> Settings:
    s = Settings(
        app_name="todo",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path / "logs",
        tasks_path=tmp_path / "tasks.json",
        prompt="todo> ",
        show_help_on_start=False,
    )
    monkeypatch.setattr(cli_main, "get_settings", lambda: s)
    return s


def test_create_initial_state_starts_empty_without_file(settings) -> None:
    state = create_initial_state(settings=settings)
    assert len(state.tasks) == 0
    assert state.store.path == settings.tasks_path
    assert state.settings is settings


def test_create_initial_state_loads_existing_tasks(settings) -> None:
    JsonTaskStore(settings.tasks_path).save([Task(2, "a"), Task(5, "b", True)])

    state = create_initial_state(settings=settings)

    assert [t.id for t in state.tasks] == [2, 5]
    assert state.tasks.add("c").id == 6


def test_create_initial_state_propagates_malformed_data(settings) -> None:
    settings.tasks_path.write_text("{broken", "utf-8")
    with pytest.raises(MalformedDataError):
        create_initial_state(settings=settings)


def test_create_initial_state_accepts_injected_store(settings, store) -> None:
    store.initial = [Task(1, "from fake")]
    state = create_initial_state(settings=settings, store=store)
    assert state.store is store
    assert [t.description for t in state.tasks] == ["from fake"]


def test_main_aborts_on_malformed_file(real_settings, capsys) -> None:
    real_settings.tasks_path.write_text("[{]", "utf-8")

    assert cli_main.main([]) == 1

    err = capsys.readouterr().err
    assert "Error loading tasks:" in err
    # the broken file is left untouched
    assert real_settings.tasks_path.read_text("utf-8") == "[{]"


def test_main_aborts_on_deeply_nested_file(real_settings, capsys) -> None:
    real_settings.tasks_path.write_text("[" * 200000 + "]" * 200000, "utf-8")

    assert cli_main.main([]) == 1

    err = capsys.readouterr().err
    assert "Error loading tasks:" in err
    assert "Traceback" not in err


def test_main_runs_session_from_stdin(real_settings, monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("add buy milk\ncomplete 1\nexit\n"))

    assert cli_main.main([]) == 0

    out = capsys.readouterr().out
    assert "Added task: buy milk" in out
    assert "Goodbye!" in out
    assert JsonTaskStore(real_settings.tasks_path).load() == [Task(1, "buy milk", True)]


def test_main_file_option_overrides_settings(real_settings, tmp_path: Path, monkeypatch) -> None:
    other = tmp_path / "elsewhere" / "mine.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("add x\n"))

    assert cli_main.main(["--file", str(other)]) == 0

    assert JsonTaskStore(other).load() == [Task(1, "x")]
    assert not real_settings.tasks_path.exists()


def test_main_writes_log_file_when_enabled(real_settings, tmp_path: Path, monkeypatch) -> None:
    s = dataclasses.replace(real_settings, log_to_file=True)
    monkeypatch.setattr(cli_main, "get_settings", lambda: s)
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

    assert cli_main.main([]) == 0

    assert (s.data_dir / "todo.log").exists()
