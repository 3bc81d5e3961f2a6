"""Extraction of Goodreads cookies from Firefox into a config file."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import click

from .browser.firefox import (
    CookieStore,
    count_cookies,
    find_cookie_databases,
    format_cookie_header,
    resolve_firefox_dir,
    temporary_copy,
)
from .display import ExtractorDisplay
from .logger import get_logger
from .models import DEFAULT_OUTPUT, GoodreadsConfig
from .selection import IndexPrompt, choose_selector, prompt_for_index
from .utils.exceptions import ConfigurationError, NotFoundError


UserIdPrompt = Callable[[], str]


def prompt_for_user_id() -> str:
    """Ask the operator to type their Goodreads user ID."""
    return click.prompt(
        "Enter your Goodreads user ID",
        default="",
        show_default=False,
        err=True,
    ).strip()


@dataclass(frozen=True)
class ExtractionOptions:
    """Everything a single extraction run needs, as given on the command line."""

    output: Path = DEFAULT_OUTPUT
    user_id: str | None = None
    firefox_dir: Path | None = None
    database_index: int | None = None


class CookieExtractor:
    """
    Pulls Goodreads cookies out of a Firefox profile and writes the config.

    Prompts are injectable so the interactive branches can be driven
    without a terminal.
    """

    def __init__(
        self,
        display: ExtractorDisplay | None = None,
        index_prompt: IndexPrompt = prompt_for_index,
        user_id_prompt: UserIdPrompt = prompt_for_user_id,
    ):
        self.display = display or ExtractorDisplay()
        self.index_prompt = index_prompt
        self.user_id_prompt = user_id_prompt
        self.logger = get_logger("GoodreadsCookies.Extractor")

    def run(self, options: ExtractionOptions) -> GoodreadsConfig:
        firefox_dir = resolve_firefox_dir(options.firefox_dir)
        self.logger.info(f"Searching {firefox_dir} for cookie databases")
        candidates = find_cookie_databases(firefox_dir)

        selector = choose_selector(
            candidates, self.display, index=options.database_index, prompt=self.index_prompt
        )
        database = selector.select(candidates)
        self.logger.info(f"Selected cookie database {database}")

        with temporary_copy(database) as copy:
            store = CookieStore(copy)
            cookies = self.extract_cookie_header(store)
            user_id = options.user_id or self.recover_user_id(store)

        if not user_id:
            self.display.user_id_help()
            user_id = self.user_id_prompt()
        if not user_id:
            raise ConfigurationError("user_id is required")

        config = GoodreadsConfig(user_id=user_id, cookies=cookies)
        config.write(options.output)
        self.logger.info(f"Config written to {options.output}")
        self.display.success(f"Config written to {options.output}")
        return config

    def extract_cookie_header(self, store: CookieStore) -> str:
        """Build the cookie header from the Goodreads rows in ``store``."""
        header = format_cookie_header(store.site_cookies())
        if not header:
            raise NotFoundError(
                "No Goodreads cookies found. "
                "Make sure you're logged in to goodreads.com in Firefox."
            )
        count = count_cookies(header)
        self.logger.info(f"Found {count} Goodreads cookies")
        self.display.info(f"Found {count} Goodreads cookies")
        return header

    def recover_user_id(self, store: CookieStore) -> str | None:
        """Return the user ID stored in the ``u`` cookie, or None."""
        user_id = store.lookup_user_id()
        if user_id is None:
            self.logger.debug("No user ID cookie found")
            return None
        self.display.info(f"Extracted user_id from cookie: {user_id}")
        return user_id
