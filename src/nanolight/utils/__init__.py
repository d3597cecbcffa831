"""Utility modules for nanolight.

Provides:
- text: escape_html for safe output
- logger: get_logger and set_log_level for the nanolight namespace
"""

from nanolight.utils.logger import get_logger, set_log_level
from nanolight.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
    "set_log_level",
]
