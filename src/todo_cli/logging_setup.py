# src/todo_cli/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_FILENAME = "todo.log"


class _ConsoleNoiseFilter(logging.Filter):
    """Pass todo_cli records; anything else (py.warnings included) only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name == "todo_cli" or name.startswith("todo_cli."):
            return True
        return record.levelno >= logging.ERROR


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    return handler


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Route all logging to stderr (filtered, so stdout stays clean for the
    prompt) and, unless log_dir is None, to <log_dir>/todo.log.

    Replaces whatever handlers the root logger already had.
    """
    handlers: list[logging.Handler] = []

    console = _make_handler(logging.StreamHandler(sys.stderr), console_level)
    console.addFilter(_ConsoleNoiseFilter())
    handlers.append(console)

    if log_dir is not None:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            _make_handler(
                logging.FileHandler(str(path / LOG_FILENAME), encoding="utf-8"), file_level
            )
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for old in list(root.handlers):
        root.removeHandler(old)
    for h in handlers:
        root.addHandler(h)

    logging.captureWarnings(True)
