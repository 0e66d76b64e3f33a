# src/todo_cli/tasks/__init__.py

from .errors import StorageError, TaskValidationError, TodoError
from .task_models import Task, TaskListing

__all__ = [
    "StorageError",
    "Task",
    "TaskListing",
    "TaskValidationError",
    "TodoError",
]
