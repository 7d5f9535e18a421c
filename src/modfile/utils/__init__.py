"""Utility modules for modfile.

Provides:
- logger: get_logger for logging
"""

from modfile.utils.logger import get_logger

__all__ = [
    "get_logger",
]
