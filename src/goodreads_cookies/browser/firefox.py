"""Firefox cookie store access.

Firefox keeps a lock on ``cookies.sqlite`` while it runs, so every query
goes through a private temporary copy that is removed when the context
manager exits.
"""

import os
import shutil
import sqlite3
import sys
import tempfile
from collections.abc import Iterator
from contextlib import closing, contextmanager
from pathlib import Path

from pydantic import ValidationError

from ..logger import get_logger
from ..models import CookieRecord
from ..utils.exceptions import ConfigurationError, CookieStoreError, NotFoundError


COOKIE_DB_NAME = "cookies.sqlite"

# Subdomains such as help.goodreads.com carry unrelated cookies
GOODREADS_HOSTS = (".goodreads.com", "www.goodreads.com")
GOODREADS_DOMAIN = "goodreads.com"
USER_ID_COOKIE = "u"

logger = get_logger("GoodreadsCookies.Firefox")


def default_firefox_dir() -> Path:
    """Return the per-user Firefox directory for the current platform."""
    home = Path.home()
    if sys.platform == "darwin":
        return home / "Library" / "Application Support" / "Firefox"
    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / "Mozilla" / "Firefox"
    return home / ".mozilla" / "firefox"


def resolve_firefox_dir(firefox_dir: Path | None = None) -> Path:
    """Return the Firefox directory to search, failing if it does not exist."""
    directory = firefox_dir.expanduser() if firefox_dir else default_firefox_dir()
    if not directory.is_dir():
        raise ConfigurationError(f"Firefox directory not found at {directory}")
    return directory


def find_cookie_databases(firefox_dir: Path) -> list[Path]:
    """Recursively find every ``cookies.sqlite`` file under ``firefox_dir``."""
    databases = sorted(p for p in firefox_dir.rglob(COOKIE_DB_NAME) if p.is_file())
    if not databases:
        raise NotFoundError(f"No {COOKIE_DB_NAME} found under {firefox_dir}")
    logger.debug(f"Found {len(databases)} cookie database(s) under {firefox_dir}")
    return databases


@contextmanager
def temporary_copy(database: Path) -> Iterator[Path]:
    """Copy ``database`` to a uniquely named temp file, deleted on exit."""
    fd, name = tempfile.mkstemp(prefix="firefox_cookies.", suffix=".sqlite")
    os.close(fd)
    copy = Path(name)
    try:
        try:
            shutil.copyfile(database, copy)
        except OSError as e:
            raise CookieStoreError(f"Could not copy {database}: {e}") from e
        logger.debug(f"Copied {database} to {copy}")
        yield copy
    finally:
        copy.unlink(missing_ok=True)
        logger.debug(f"Removed temporary copy {copy}")


class CookieStore:
    """Read-only queries against a copy of a Firefox cookie database."""

    def __init__(self, path: Path):
        self.path = path

    def _connect(self) -> sqlite3.Connection:
        # The copy is private, so it can be opened immutable: no locks, no sidecar files
        return sqlite3.connect(f"{self.path.resolve().as_uri()}?mode=ro&immutable=1", uri=True)

    def site_cookies(self, hosts: tuple[str, ...] = GOODREADS_HOSTS) -> list[CookieRecord]:
        """Return the cookies set exactly on ``hosts``, ordered by name."""
        placeholders = ", ".join("?" for _ in hosts)
        query = (
            "SELECT host, name, COALESCE(value, '') FROM moz_cookies "
            f"WHERE host IN ({placeholders}) ORDER BY name"
        )
        try:
            with closing(self._connect()) as conn:
                rows = conn.execute(query, hosts).fetchall()
        except sqlite3.Error as e:
            raise CookieStoreError(f"Could not read cookies from {self.path}: {e}") from e
        try:
            return [CookieRecord(host=host, name=name, value=value) for host, name, value in rows]
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors())
            raise CookieStoreError(f"Malformed cookie row in {self.path}: invalid {fields}") from e

    def lookup_user_id(self, domain: str = GOODREADS_DOMAIN) -> str | None:
        """Return the value of the ``u`` cookie for ``domain``, if any.

        Lookup failures are not fatal: the caller falls back to asking the
        operator, so errors are logged and reported as ``None``.
        """
        query = "SELECT value FROM moz_cookies WHERE host LIKE ? AND name = ? LIMIT 1"
        try:
            with closing(self._connect()) as conn:
                row = conn.execute(query, (f"%{domain}", USER_ID_COOKIE)).fetchone()
        except sqlite3.Error as e:
            logger.debug(f"User ID lookup failed: {e}")
            return None
        if row is None or not row[0]:
            return None
        return str(row[0])


def format_cookie_header(records: list[CookieRecord]) -> str:
    """Join cookies as ``name=value`` pairs separated by ``'; '``."""
    return "; ".join(record.as_pair() for record in sorted(records, key=lambda r: r.name))


def count_cookies(header: str) -> int:
    """Count the pairs in a cookie header built by :func:`format_cookie_header`."""
    return len(header.split("; ")) if header else 0
