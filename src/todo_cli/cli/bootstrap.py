# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it picks the backend named in the
settings and wires the concrete store the commands will talk to.
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_BACKEND
from ..ports import TaskRepo
from ..tasks.errors import StorageError
from ..tasks.json_store import JsonTaskStore
from ..tasks.sqlite_store import SqliteTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    try:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"cannot create data directory {settings.data_dir}: {exc}") from exc


def open_store(settings) -> TaskRepo:
    """
    Open the task store selected by settings.backend.

    Unknown backend names fall back to SQLite. Settings are passed in rather
    than read globally so tests can point everything at tmp_path.
    """
    _ensure_local_dirs(settings)

    backend = str(getattr(settings, "backend", DEFAULT_BACKEND) or DEFAULT_BACKEND).lower()
    if backend == "json":
        return JsonTaskStore(settings.json_path, lock_timeout=settings.lock_timeout)

    if backend != "sqlite":
        logger.warning("Unknown backend %r; using %s.", backend, DEFAULT_BACKEND)
    return SqliteTaskStore(settings.db_path, timeout=settings.sqlite_timeout)
