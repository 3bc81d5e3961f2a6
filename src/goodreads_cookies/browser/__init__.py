"""Browser cookie store access."""

from .firefox import (
    GOODREADS_HOSTS,
    CookieStore,
    count_cookies,
    default_firefox_dir,
    find_cookie_databases,
    format_cookie_header,
    resolve_firefox_dir,
    temporary_copy,
)


__all__ = [
    "GOODREADS_HOSTS",
    "CookieStore",
    "count_cookies",
    "default_firefox_dir",
    "find_cookie_databases",
    "format_cookie_header",
    "resolve_firefox_dir",
    "temporary_copy",
]
