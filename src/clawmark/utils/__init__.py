"""Utility modules for clawmark.

Provides:
- text: slugify, escape_html for text processing
- logger: get_logger for logging
"""

from clawmark.utils.logger import get_logger
from clawmark.utils.text import escape_html, slugify

__all__ = [
    "escape_html",
    "get_logger",
    "slugify",
]
