"""Minimal logging utilities for diffable_html.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications and test runners do.

Example:
    >>> from diffable_html.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Formatter returned bytes")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "diffable_html"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "diffable_html." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("formatter")
        >>> logger.name
        'diffable_html.formatter'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
