"""Minimal logging utilities for streamreplace.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; configure logging in the application.

Example:
    >>> from streamreplace.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("commit at %d", 42)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "streamreplace." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'streamreplace.mymodule'
    """
    if not (name == "streamreplace" or name.startswith("streamreplace.")):
        name = f"streamreplace.{name}"
    return logging.getLogger(name)
