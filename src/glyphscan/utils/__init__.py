"""Utility modules for glyphscan.

Provides:
- logger: get_logger for logging
"""

from glyphscan.utils.logger import get_logger

__all__ = [
    "get_logger",
]
