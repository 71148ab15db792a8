"""Logging setup shared by the command line entry points."""

import logging
import os
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[str] = None,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure the ``wator`` logger.

    Args:
        level: Explicit log level. Falls back to the ``WATOR_LOG_LEVEL`` env
            var, then INFO.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger.
    """
    raw_level = level if level is not None else os.getenv("WATOR_LOG_LEVEL")
    resolved_level = (raw_level or "INFO").upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("wator")
    app_logger.setLevel(resolved_level)
    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(max(logging.INFO, app_logger.level))

    app_logger.debug("logging configured at %s", resolved_level)
    return app_logger
