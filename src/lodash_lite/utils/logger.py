"""Package-wide logger configuration for lodash-lite."""

from __future__ import annotations

import logging
import os
import sys

__all__ = ["LOG_LEVEL_ENV", "logger", "setup_logger"]

LOG_LEVEL_ENV: str = "LODASH_LITE_LOG_LEVEL"
"""Environment variable consulted when no explicit level is given."""


def setup_logger(
    name: str = "lodash_lite",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
        logger.propagate = False

    return logger


logger = setup_logger()
