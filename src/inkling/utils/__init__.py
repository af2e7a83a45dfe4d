"""Utility modules for Inkling.

Provides:
- text: escape_html for renderer output
- logger: get_logger for logging
"""

from inkling.utils.logger import get_logger
from inkling.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
