"""Utility modules for mdtohtml.

Provides:
- text: escape_html for output escaping
- logger: configure_logging for command-line log output
"""

from mdtohtml.utils.logger import configure_logging, reset_logging
from mdtohtml.utils.text import escape_html

__all__ = [
    "configure_logging",
    "escape_html",
    "reset_logging",
]
