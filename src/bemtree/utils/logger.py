"""Minimal logging utilities for bemtree.

Wraps the standard library logging so every module logs under one
``bemtree`` namespace. The library never installs handlers; hosts
(the CLI included) decide where records go.

Example:
    >>> from bemtree.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Skipping class %r", "__orphan")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "bemtree"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "bemtree." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'bemtree.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}.")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
