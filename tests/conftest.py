# tests/conftest.py

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest

from todo_cli.cli.bootstrap import open_store
from todo_cli.config import Settings


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing every path at tmp_path.

    Built directly instead of through Settings.from_env(), so the developer's
    own TODO_* environment and ~/.todo never leak into the tests.
    """
    data_dir = tmp_path / "data"
    return Settings(
        backend="sqlite",
        data_dir=data_dir,
        db_path=data_dir / "todos.db",
        json_path=data_dir / "todos.json",
        log_level="WARNING",
        log_file=None,
        lock_timeout=1.0,
        sqlite_timeout=1.0,
    )


@pytest.fixture(params=["json", "sqlite"])
def backend(request) -> str:
    return request.param


@pytest.fixture()
def store(settings: Settings, backend: str):
    """A fresh store for each backend; contract tests run against both."""
    return open_store(replace(settings, backend=backend))

