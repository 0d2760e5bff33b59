"""
Logging setup.

The library only attaches a handler when init_logging() is called; modules
obtain their loggers through get_logger().
"""

import logging

from .config import settings

_PACKAGE_LOGGER = "media_rss"


def init_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Log level name. Defaults to settings.log_level.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel((level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(settings.log_format))
        logger.addHandler(handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module."""
    return logging.getLogger(name)
