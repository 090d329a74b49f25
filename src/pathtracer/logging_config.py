"""Logging configuration for the path tracer."""

import logging
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None, name: str = "pathtracer") -> logging.Logger:
    """
    Set up logging for the package.

    Logs go to stderr; stdout is left free for image output.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger name

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()  # stderr
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
