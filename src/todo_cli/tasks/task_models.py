# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, NamedTuple

from .errors import TaskValidationError


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from a persisted JSON object.

        Raises KeyError/TypeError/ValueError on malformed input; the JSON store
        treats any of them as a corrupt document.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task entry must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        # bool is an int subclass; "id": true is not a valid id.
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TypeError(f"task id must be an integer, got {task_id!r}")

        title = raw["title"]
        if not isinstance(title, str):
            raise TypeError(f"task title must be a string, got {title!r}")

        completed = raw.get("completed", False)
        if not isinstance(completed, bool):
            raise TypeError(f"task completed flag must be a boolean, got {completed!r}")

        return cls(
            id=task_id,
            title=title,
            description=str(raw.get("description") or ""),
            completed=completed,
        )


class TaskListing(NamedTuple):
    pending: list[Task]
    completed: list[Task]


def split_by_completion(tasks: Iterable[Task]) -> TaskListing:
    """Partition tasks into (pending, completed), keeping the input order in each."""
    pending: list[Task] = []
    completed: list[Task] = []
    for task in tasks:
        (completed if task.completed else pending).append(task)
    return TaskListing(pending=pending, completed=completed)


def require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise TaskValidationError(f"{field} is required")
    return value


def next_task_id(tasks: Iterable[Task]) -> int:
    return max((t.id for t in tasks), default=0) + 1
