"""Utility helpers for goodreads-cookies."""

from .exceptions import (
    ConfigurationError,
    CookieStoreError,
    GoodreadsCookiesError,
    NotFoundError,
    SelectionError,
    ValidationError,
)


__all__ = [
    "ConfigurationError",
    "CookieStoreError",
    "GoodreadsCookiesError",
    "NotFoundError",
    "SelectionError",
    "ValidationError",
]
