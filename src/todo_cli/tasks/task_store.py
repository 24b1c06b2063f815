# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import MalformedDataError, TaskStorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonTaskStore:
    """
    JSON file task store.

    The whole collection is read and written at once:
    - a missing file means "no tasks yet"
    - saves go to a sibling .tmp file first and are moved into place with
      os.replace, so an interrupted write never truncates the real file
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty.", self._path)
            return []
        except UnicodeDecodeError as e:
            raise MalformedDataError(f"{self._path}: not UTF-8 text ({e.reason})") from e
        except OSError as e:
            raise TaskStorageError(f"cannot read {self._path}: {e.strerror or e}") from e

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            # also oversized integer literals and very deep nesting
            raise MalformedDataError(f"{self._path}: invalid JSON ({e})") from e

        if data is None:
            return []
        if not isinstance(data, list):
            raise MalformedDataError(
                f"{self._path}: expected a list of tasks, got {type(data).__name__}"
            )

        tasks: list[Task] = []
        for i, rec in enumerate(data):
            try:
                tasks.append(Task.from_dict(rec))
            except ValueError as e:
                raise MalformedDataError(f"{self._path}: record #{i}: {e}") from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        payload = [t.to_dict() for t in tasks]
        text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStorageError(f"cannot write {self._path}: {e.strerror or e}") from e

        logger.debug("Saved %d tasks to %s", len(payload), self._path)
