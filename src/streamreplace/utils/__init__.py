"""Utility modules for streamreplace.

Provides:
- logger: get_logger for logging
"""

from streamreplace.utils.logger import get_logger

__all__ = [
    "get_logger",
]
