"""Utility modules for diffable_html.

Provides:
- text: escape_html, indentation
- logger: get_logger for logging
"""

from diffable_html.utils.logger import get_logger
from diffable_html.utils.text import escape_html, indentation

__all__ = [
    "escape_html",
    "get_logger",
    "indentation",
]
