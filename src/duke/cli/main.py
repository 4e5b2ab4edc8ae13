# src/duke/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading saved tasks), runs the console
REPL in the main thread, then saves once more on the way out.
"""

from __future__ import annotations

import logging
import sqlite3

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    """Final save; errors are logged, never raised."""
    try:
        state.save()
    except sqlite3.Error:
        logger.exception("Failed to save tasks on shutdown.")

    # TaskStore uses short-lived sqlite connections per call; no explicit close required.


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.data_dir if settings.log_to_file else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
