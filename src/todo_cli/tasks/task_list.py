# src/todo_cli/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..core.errors import TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

DONE_MARK = "[✓]"
PENDING_MARK = "[ ]"
EMPTY_NOTICE = "No tasks found."


class TaskList:
    """
    In-memory ordered task collection for one session.

    Ids are allocated as max(existing ids) + 1. The highest id ever seen in
    this session is remembered, so deleting the newest task does not make its
    id available again.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._last_id: int = max((t.id for t in self._tasks), default=0)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        """Snapshot copy, in insertion order."""
        return list(self._tasks)

    def find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, description: str) -> Task:
        text = description.strip()
        if not text:
            raise ValueError("description is required")

        current_max = max((t.id for t in self._tasks), default=0)
        self._last_id = max(self._last_id, current_max) + 1

        task = Task(id=self._last_id, description=text)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    def complete(self, task_id: int) -> Task:
        task = self.find(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        task.completed = True
        logger.debug("Task completed id=%s", task_id)
        return task

    def delete(self, task_id: int) -> Task:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                logger.debug("Task deleted id=%s", task_id)
                return task
        raise TaskNotFoundError(task_id)


def format_task(task: Task) -> str:
    mark = DONE_MARK if task.completed else PENDING_MARK
    return f"{task.id}. {mark} {task.description}"


def format_task_list(tasks: Iterable[Task]) -> str:
    lines = [format_task(t) for t in tasks]
    if not lines:
        return EMPTY_NOTICE
    return "\n".join(["Your Tasks", "==========", *lines])
