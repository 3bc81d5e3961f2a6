"""Custom exception hierarchy for goodreads-cookies."""


class GoodreadsCookiesError(Exception):
    """Base exception for all goodreads-cookies errors."""


class ConfigurationError(GoodreadsCookiesError):
    """Raised when required environment or input is missing."""


class NotFoundError(GoodreadsCookiesError):
    """Raised when expected data is absent from a reachable source."""


class CookieStoreError(GoodreadsCookiesError):
    """Raised when the cookie database cannot be copied or read."""


class ValidationError(GoodreadsCookiesError):
    """Raised when data validation fails."""


class SelectionError(ValidationError):
    """Raised when a preselected database index is out of range."""
