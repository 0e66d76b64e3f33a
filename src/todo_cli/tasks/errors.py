# src/todo_cli/tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for errors raised by the task stores."""


class TaskValidationError(TodoError, ValueError):
    """A required field was missing or blank."""


class StorageError(TodoError):
    """
    The backend could not be opened, read or written.

    The message is shown to the operator as-is, so it should name the path
    and the underlying failure.
    """
