"""Minimal logging utilities for treetext.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from treetext.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Rendering tree")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "treetext." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'treetext.mymodule'
    """
    if not (name == "treetext" or name.startswith("treetext.")):
        name = f"treetext.{name}"
    return logging.getLogger(name)
