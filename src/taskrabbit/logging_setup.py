# taskrabbit/logging_setup.py
"""
Logging configuration for taskrabbit.

Library modules only create loggers; handlers are attached here, once, by the
CLI (or by an embedding application that wants taskrabbit's diagnostics).
"""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "taskrabbit"
LOG_LEVEL_ENV = "TASKRABBIT_LOG_LEVEL"

FORMATS = {
    "simple": "%(levelname)s %(name)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)s %(name)s [%(filename)s:%(lineno)d]: %(message)s",
}

_HANDLER_ATTR = "_taskrabbit_handler"


def default_level() -> str:
    """Level from $TASKRABBIT_LOG_LEVEL, ERROR if unset or unknown."""
    level = os.getenv(LOG_LEVEL_ENV, "ERROR").upper()
    return level if isinstance(logging.getLevelName(level), int) else "ERROR"


def setup_logging(
    level: str | int | None = None,
    *,
    format: str = "simple",
    format_string: str | None = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Attach a single stderr handler to the 'taskrabbit' logger.

    Calling it again replaces the previous handler instead of stacking one.

    Args:
        level: Level name or number (default: $TASKRABBIT_LOG_LEVEL or ERROR)
        format: 'simple' or 'detailed'
        format_string: Custom logging format, overrides `format`
        propagate: Also pass records to the root logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = default_level()
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    logger.propagate = propagate

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or FORMATS.get(format, FORMATS["simple"])))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    return logger


def disable_logging() -> None:
    """Silence taskrabbit logging entirely (useful for tests)."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.CRITICAL + 1)
