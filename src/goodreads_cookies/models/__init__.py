"""Data models for goodreads-cookies."""

from .config import DEFAULT_OUTPUT, ExtractorSettings, GoodreadsConfig
from .cookie import CookieRecord


__all__ = [
    "DEFAULT_OUTPUT",
    "CookieRecord",
    "ExtractorSettings",
    "GoodreadsConfig",
]
