"""Logging for the expense tracker.

The page calls ``configure_logging`` on every rerun; only the first call
does anything. Other modules take their logger from ``get_logger``.
"""

import logging

LOGGER_NAME = "expense_tracker"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level=None) -> None:
    """Send ``expense_tracker.*`` records to stderr at ``level`` (default INFO)."""
    logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    # Keep records out of Streamlit's root handlers.
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
