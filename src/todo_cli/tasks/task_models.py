# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    id: int
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        # Key order is the on-disk field order.
        return {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Build a Task from one decoded JSON record.

        Raises ValueError when the record does not have the expected shape:
        - id must be an integer (booleans are rejected)
        - description must be a string
        - completed is optional and must be a boolean when present
        """
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        tid = raw.get("id")
        if isinstance(tid, bool) or not isinstance(tid, int):
            raise ValueError(f"task id must be an integer, got {tid!r}")

        description = raw.get("description")
        if not isinstance(description, str):
            raise ValueError(f"task {tid}: description must be a string")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise ValueError(f"task {tid}: completed must be a boolean")

        return cls(id=tid, description=description, completed=completed)
