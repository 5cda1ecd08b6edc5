"""Utility modules for treetext.

Provides:
- logger: get_logger for logging
"""

from treetext.utils.logger import get_logger

__all__ = [
    "get_logger",
]
