# src/chatterbox/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console loop until the
user says bye (or stdin closes).
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_file = settings.log_file if settings.log_to_file else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.info("Starting %s (tasks file: %s)", settings.app_name, settings.tasks_file)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
