"""
Logging configuration.

The package logger stays silent (``NullHandler``) until the application
opts in with ``configure_logging``.

Usage:
    from this_is_fine.shared.logging import configure_logging

    configure_logging("DEBUG")
"""

import logging
import sys

from this_is_fine.shared.config import get_settings

PACKAGE_LOGGER = "this_is_fine"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to the ``log_level`` setting.

    Returns:
        The configured package logger
    """
    if level is None:
        level = get_settings().log_level

    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    # Add console handler only once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
