"""Utility modules for bemtree.

Provides:
- logger: get_logger for namespaced logging
"""

from bemtree.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
