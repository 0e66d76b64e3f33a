# src/todo_cli/tasks/sqlite_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .errors import StorageError
from .task_models import Task, TaskListing, require_text, split_by_completion

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot exist in the table.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


class SqliteTaskStore:
    """
    SQLite task store.

    The schema is a single table, created if missing every time the store is
    opened. There are no migrations.

    Ids are computed as MAX(id) + 1 inside a BEGIN IMMEDIATE transaction, so two
    processes adding at once serialize on the database write lock instead of
    racing for the same id.

    Each method opens its own SQLite connection.
    """

    def __init__(self, db_path: str | Path = "todos.db", *, timeout: float = 30.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = float(timeout)
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"cannot create directory for {self._db_path}: {exc}") from exc
        self._ensure_schema()
        logger.info("SqliteTaskStore ready db=%s total=%s", self._db_path, self.count())

    @property
    def path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection; any sqlite3.Error becomes a StorageError."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open database {self._db_path}: {exc}") from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            raise StorageError(f"database error in {self._db_path}: {exc}") from exc
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT,
                    completed BOOLEAN DEFAULT 0
                )
                """
            )
            conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            description=str(row["description"] or ""),
            completed=bool(row["completed"]),
        )

    # ---- public API ----

    def count(self) -> int:
        with self._connect() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM todos").fetchone()
            return int(n)

    def add(self, title: str, description: str) -> Task:
        title = require_text(title, "title")
        description = require_text(description, "description")

        with self._connect() as conn:
            conn.execute("BEGIN IMMEDIATE")
            (next_id,) = conn.execute("SELECT COALESCE(MAX(id), 0) + 1 FROM todos").fetchone()
            task = Task(id=int(next_id), title=title, description=description)
            conn.execute(
                "INSERT INTO todos (id, title, description, completed) VALUES (?, ?, ?, ?)",
                (task.id, task.title, task.description, 0),
            )
            conn.commit()

        logger.debug("Task added id=%s title=%r", task.id, task.title)
        return task

    def list(self) -> TaskListing:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, title, description, completed FROM todos ORDER BY id"
            ).fetchall()
        return split_by_completion(self._row_to_task(r) for r in rows)

    def complete(self, task_id: int) -> bool:
        if not _MIN_ID <= task_id <= _MAX_ID:
            return False
        with self._connect() as conn:
            cur = conn.execute("UPDATE todos SET completed = 1 WHERE id = ?", (int(task_id),))
            conn.commit()
            found = cur.rowcount > 0
        logger.debug("Task complete id=%s found=%s", task_id, found)
        return found

    def remove(self, task_id: int) -> bool:
        if not _MIN_ID <= task_id <= _MAX_ID:
            return False
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM todos WHERE id = ?", (int(task_id),))
            conn.commit()
            found = cur.rowcount > 0
        logger.debug("Task remove id=%s found=%s", task_id, found)
        return found
