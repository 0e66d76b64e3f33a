# src/todo_cli/tasks/json_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TypeVar

from filelock import FileLock, Timeout

from .errors import StorageError
from .task_models import Task, TaskListing, next_task_id, require_text, split_by_completion

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonTaskStore:
    """
    Task store backed by a single JSON document.

    File format: a top-level array of task objects
    ({"id", "title", "description", "completed"}), rewritten wholesale on every
    mutation through a temp file + os.replace.

    Every operation holds an exclusive lock on "<file>.lock" from the read until
    the write, so at most one process mutates the document at a time.

    A missing file is an empty store. A corrupt file is also read as an empty
    store (logged as a warning); the next mutation overwrites it.
    """

    def __init__(self, path: str | Path = "todos.json", *, lock_timeout: float = 10.0) -> None:
        self._path = Path(path)
        self._lock = FileLock(str(self._path.with_name(self._path.name + ".lock")))
        self._lock_timeout = float(lock_timeout)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create directory for {self._path}: {exc}") from exc
        logger.info("JsonTaskStore ready path=%s exists=%s", self._path, self._path.exists())

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    @contextmanager
    def _locked(self) -> Iterator[None]:
        try:
            with self._lock.acquire(timeout=self._lock_timeout):
                yield
        except Timeout as exc:
            raise StorageError(
                f"timed out after {self._lock_timeout:g}s waiting for lock {exc.lock_file}"
            ) from exc

    def _load(self) -> list[Task]:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageError(f"cannot read {self._path}: {exc}") from exc

        try:
            # json.loads decodes the bytes itself; bad UTF-8 is a ValueError like bad JSON.
            raw = json.loads(data)
            if not isinstance(raw, list):
                raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
            return [Task.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Corrupt task file %s (%s); treating it as empty.", self._path, exc)
            return []

    def _save(self, tasks: list[Task]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            with tmp.open("w", encoding="utf-8") as handle:
                json.dump([t.to_dict() for t in tasks], handle, ensure_ascii=False, indent=2)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp, self._path)
        except OSError as exc:
            raise StorageError(f"cannot write {self._path}: {exc}") from exc

    def _mutate(self, fn: Callable[[list[Task]], T]) -> T:
        """Run fn over the loaded tasks under the lock; save if it returns truthy."""
        with self._locked():
            tasks = self._load()
            result = fn(tasks)
            if result:
                self._save(tasks)
            return result

    # ---- public API ----

    def count(self) -> int:
        with self._locked():
            return len(self._load())

    def add(self, title: str, description: str) -> Task:
        title = require_text(title, "title")
        description = require_text(description, "description")

        def _append(tasks: list[Task]) -> Task:
            task = Task(id=next_task_id(tasks), title=title, description=description)
            tasks.append(task)
            return task

        task = self._mutate(_append)
        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> TaskListing:
        with self._locked():
            return split_by_completion(self._load())

    def complete(self, task_id: int) -> bool:
        def _mark(tasks: list[Task]) -> bool:
            for task in tasks:
                if task.id == task_id:
                    task.completed = True
                    return True
            return False

        found = self._mutate(_mark)
        logger.debug("Task complete id=%s found=%s", task_id, found)
        return found

    def remove(self, task_id: int) -> bool:
        def _drop(tasks: list[Task]) -> bool:
            for idx, task in enumerate(tasks):
                if task.id == task_id:
                    del tasks[idx]
                    return True
            return False

        found = self._mutate(_drop)
        logger.debug("Task remove id=%s found=%s", task_id, found)
        return found
