"""
Logging configuration and utilities.

All loggers live under the ``str_enum`` namespace so the CLI (or a host
application) can tune the generator's verbosity in one place.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "str_enum"


def setup_logging(level: str | None = None) -> None:
    """
    Configure logging for the str_enum package.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...). Defaults to the
            STR_ENUM_LOG_LEVEL environment variable, then WARNING.
    """
    if level is None:
        level = os.environ.get("STR_ENUM_LOG_LEVEL", "WARNING")

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module of this package.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger nested under the package namespace
    """
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
