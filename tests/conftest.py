"""Shared pytest fixtures and configuration for goodreads-cookies tests."""

import sqlite3
from collections.abc import Callable, Iterable
from contextlib import closing
from pathlib import Path

import pytest


CookieRow = tuple[str, str, str]


def write_cookie_db(path: Path, rows: Iterable[CookieRow]) -> Path:
    """Create a minimal Firefox ``cookies.sqlite`` holding ``(host, name, value)`` rows."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with closing(sqlite3.connect(path)) as conn:
        conn.execute(
            "CREATE TABLE moz_cookies ("
            "id INTEGER PRIMARY KEY, host TEXT, name TEXT, value TEXT, path TEXT DEFAULT '/')"
        )
        conn.executemany("INSERT INTO moz_cookies (host, name, value) VALUES (?, ?, ?)", rows)
        conn.commit()
    return path


@pytest.fixture
def goodreads_rows() -> list[CookieRow]:
    """Cookie rows for a logged-in Goodreads session plus unrelated hosts."""
    return [
        (".goodreads.com", "session-id", "131-0000000-0000000"),
        ("www.goodreads.com", "_session_id2", "abc123"),
        (".goodreads.com", "at-main", "Atza|token"),
        ("help.goodreads.com", "helpcookie", "ignored"),
        (".example.com", "tracking", "ignored"),
    ]


@pytest.fixture
def make_cookie_db(tmp_path) -> Callable[..., Path]:
    """Factory writing a cookie database into a profile of a fake Firefox tree."""

    def _make(rows: Iterable[CookieRow], profile: str = "abcd1234.default-release") -> Path:
        return write_cookie_db(tmp_path / "Firefox" / "Profiles" / profile / "cookies.sqlite", rows)

    return _make


@pytest.fixture
def firefox_dir(tmp_path, make_cookie_db, goodreads_rows) -> Path:
    """A Firefox directory with a single profile logged in to Goodreads."""
    make_cookie_db(goodreads_rows)
    return tmp_path / "Firefox"


@pytest.fixture
def empty_firefox_dir(tmp_path) -> Path:
    """A Firefox directory without any profiles."""
    directory = tmp_path / "Firefox"
    directory.mkdir()
    return directory


@pytest.fixture
def temp_dir_contents(tmp_path, monkeypatch) -> Callable[[], list[Path]]:
    """Redirect temporary files into a private directory and list what is left in it."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setattr("tempfile.tempdir", str(temp_dir))
    return lambda: sorted(temp_dir.iterdir())


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep GOODREADS_COOKIES_* variables and .env files out of the tests."""
    for name in ("OUTPUT", "FIREFOX_DIR", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"GOODREADS_COOKIES_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def pytest_collection_modifyitems(config, items):
    """Auto-mark tests based on location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
