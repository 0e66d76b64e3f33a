"""Personal task tracker with JSON-file and SQLite backends."""

__version__ = "0.1.0"
