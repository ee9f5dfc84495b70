"""Minimal logging utilities for clawmark.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from clawmark.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "clawmark." prefix.

    Example:
        >>> get_logger("mymodule").name
        'clawmark.mymodule'
    """
    if not (name == "clawmark" or name.startswith("clawmark.")):
        name = f"clawmark.{name}"
    return logging.getLogger(name)
