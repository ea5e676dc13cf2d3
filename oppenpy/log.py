"""Package-wide logging helpers.

A NullHandler is installed on the package logger so that importing the
library stays silent until the application configures logging.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER_NAME = "oppenpy"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger scoped to oppenpy (the package logger when `name` is None)."""
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: TextIO | None = None,
    fmt: str | None = None,
    logger_name: str = PACKAGE_LOGGER_NAME,
) -> logging.Logger:
    """Attach a single stream handler to an oppenpy logger.

    Handlers previously installed by this function are replaced, so calling it
    twice does not duplicate records.
    """
    logger = get_logger(logger_name)

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_oppenpy_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or "%(levelname)s %(name)s: %(message)s"))
    handler._oppenpy_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
