# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds AppState from the task file,
then runs the console loop in the main thread.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import MalformedDataError, TaskStorageError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="todo", description="Interactive task manager.")
    p.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help=f"Path to tasks file (default: {settings.tasks_path})",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    if args.file is not None:
        settings = dataclasses.replace(settings, tasks_path=args.file.expanduser())

    console_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(
        log_dir=settings.data_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except (MalformedDataError, TaskStorageError) as e:
        logger.info("Failed to load tasks: %s", e)
        print(f"Error loading tasks: {e}", file=sys.stderr)
        return 1

    run_console_loop(state)
    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
