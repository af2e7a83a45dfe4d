"""Minimal logging utilities for Inkling.

Provides a simple get_logger function that wraps the standard library logging.
The library never attaches handlers; applications decide where records go.

Example:
    >>> from inkling.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing markup")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "inkling." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'inkling.mymodule'
    """
    if not (name == "inkling" or name.startswith("inkling.")):
        name = f"inkling.{name}"
    return logging.getLogger(name)
