# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Loads settings, initializes logging, then hands argv to the click command
group. Each invocation opens the store, runs exactly one operation and exits.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..logging_setup import setup_logging
from .commands import cli

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    try:
        setup_logging(console_level=console_level, log_file=settings.log_file)
    except OSError:
        # An unwritable log file must not block the command itself.
        setup_logging(console_level=console_level, log_file=None)
        logger.warning("Cannot open log file %s; logging to stderr only.", settings.log_file)

    logger.debug("Starting todo backend=%s data_dir=%s", settings.backend, settings.data_dir)
    cli.main(obj=settings, prog_name="todo")


if __name__ == "__main__":
    main()
