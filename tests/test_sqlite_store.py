# tests/test_sqlite_store.py

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from todo_cli.tasks.errors import StorageError
from todo_cli.tasks.sqlite_store import SqliteTaskStore


def _columns(db: Path) -> list[str]:
    conn = sqlite3.connect(str(db))
    try:
        return [row[1] for row in conn.execute("PRAGMA table_info(todos)")]
    finally:
        conn.close()


def test_schema_bootstrap_is_idempotent(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    SqliteTaskStore(db).add("a", "1")
    store = SqliteTaskStore(db)

    assert _columns(db) == ["id", "title", "description", "completed"]
    assert store.count() == 1


def test_creates_parent_directory(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "dir" / "todos.db"
    SqliteTaskStore(db)
    assert db.exists()


def test_ids_continue_across_reopen(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    SqliteTaskStore(db).add("a", "1")
    SqliteTaskStore(db).add("b", "2")
    listing = SqliteTaskStore(db).list()
    assert [t.id for t in listing.pending] == [1, 2]


def test_reads_rows_written_by_other_tools(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    store = SqliteTaskStore(db)

    conn = sqlite3.connect(str(db))
    try:
        conn.execute("INSERT INTO todos (id, title, description, completed) VALUES (7, 't', NULL, 1)")
        conn.execute("INSERT INTO todos (id, title) VALUES (3, 'u')")
        conn.commit()
    finally:
        conn.close()

    listing = store.list()
    assert [(t.id, t.description, t.completed) for t in listing.pending] == [(3, "", False)]
    assert [(t.id, t.description, t.completed) for t in listing.completed] == [(7, "", True)]
    assert store.add("next", "after max").id == 8


def test_not_a_database_is_storage_error(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    db.write_bytes(b"this is definitely not an sqlite database file" * 20)
    with pytest.raises(StorageError, match=str(db.name)):
        SqliteTaskStore(db)


def test_directory_in_place_of_database_is_storage_error(tmp_path: Path) -> None:
    db = tmp_path / "todos.db"
    db.mkdir()
    with pytest.raises(StorageError):
        SqliteTaskStore(db)
