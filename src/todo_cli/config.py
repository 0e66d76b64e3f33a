# src/todo_cli/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Per-user data lives under ~/.todo unless TODO_DATA_DIR says otherwise.
- Individual paths can still be pointed elsewhere.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

BACKENDS = ("sqlite", "json")
DEFAULT_BACKEND = "sqlite"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_optional_path(name: str, default: Path) -> Path | None:
    # Set but empty means "disabled".
    raw = os.getenv(name)
    if raw is None:
        return default
    if raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    backend: str
    data_dir: Path
    db_path: Path
    json_path: Path

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Timeouts (seconds) ----
    lock_timeout: float
    sqlite_timeout: float

    @staticmethod
    def from_env() -> "Settings":
        backend = _env(_k("BACKEND"), DEFAULT_BACKEND).strip().lower()

        data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".todo")
        db_path = _env_path(_k("DB_PATH"), data_dir / "todos.db")
        json_path = _env_path(_k("JSON_PATH"), data_dir / "todos.json")

        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_file = _env_optional_path(_k("LOG_FILE"), data_dir / "todo.log")

        lock_timeout = _env_float(_k("LOCK_TIMEOUT"), 10.0)
        sqlite_timeout = _env_float(_k("SQLITE_TIMEOUT"), 30.0)

        return Settings(
            backend=backend,
            data_dir=data_dir,
            db_path=db_path,
            json_path=json_path,
            log_level=log_level,
            log_file=log_file,
            lock_timeout=lock_timeout,
            sqlite_timeout=sqlite_timeout,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
