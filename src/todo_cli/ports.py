# src/todo_cli/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI.

Commands depend on the TaskRepo Protocol instead of a concrete backend,
so the JSON and SQLite stores stay swappable and tests can pass fakes.
"""

from typing import Protocol

from .tasks.task_models import Task, TaskListing


class TaskRepo(Protocol):
    def add(self, title: str, description: str) -> Task: ...

    def list(self) -> TaskListing: ...

    # Both return False when no task has the given id.
    def complete(self, task_id: int) -> bool: ...
    def remove(self, task_id: int) -> bool: ...

    def count(self) -> int: ...
