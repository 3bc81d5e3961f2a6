"""
Rich-based display for goodreads-cookies.

Formatted progress messages, the candidate database table and error output.
"""

from .constants import STYLES, USER_ID_HELP_URL
from .rich_display import ExtractorDisplay


__all__ = [
    "STYLES",
    "USER_ID_HELP_URL",
    "ExtractorDisplay",
]
