# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Storage
    "TODO_BACKEND": "Storage backend: sqlite or json (default: sqlite).",
    "TODO_DATA_DIR": "Per-user data directory (default: ~/.todo).",
    "TODO_DB_PATH": "SQLite database path (default: <data_dir>/todos.db).",
    "TODO_JSON_PATH": "JSON document path (default: <data_dir>/todos.json).",
    # Logging
    "TODO_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TODO_LOG_FILE": "Debug log file (default: <data_dir>/todo.log; empty disables it).",
    # Timeouts
    "TODO_LOCK_TIMEOUT": "Seconds to wait for the JSON file lock (default: 10).",
    "TODO_SQLITE_TIMEOUT": "Seconds SQLite waits on a busy database (default: 30).",
}
