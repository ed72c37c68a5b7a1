"""Minimal logging utilities for glyphscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from glyphscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanner reset")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "glyphscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'glyphscan.mymodule'
    """
    if not (name == "glyphscan" or name.startswith("glyphscan.")):
        name = f"glyphscan.{name}"
    return logging.getLogger(name)
