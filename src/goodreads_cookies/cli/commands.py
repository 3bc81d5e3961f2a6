"""
Click-based CLI for goodreads-cookies.

A single command that reads the Goodreads cookies from a Firefox profile and
writes them, with the Goodreads user ID, to a JSON config file.
"""

import signal
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import FrameType

import click

from .. import __version__
from ..display import ExtractorDisplay
from ..extractor import CookieExtractor, ExtractionOptions
from ..logger import get_logger, get_valid_log_levels, setup_logger
from ..models import ExtractorSettings
from ..utils.exceptions import GoodreadsCookiesError


@contextmanager
def exit_on_sigterm() -> Iterator[None]:
    """Turn SIGTERM into SystemExit so pending ``finally`` blocks still run."""

    def _handler(signum: int, frame: FrameType | None) -> None:
        sys.exit(128 + signum)

    try:
        previous = signal.signal(signal.SIGTERM, _handler)
    except ValueError:
        # Not the main thread; leave signal handling alone
        yield
        return
    try:
        yield
    finally:
        signal.signal(signal.SIGTERM, previous)


@click.command(context_settings={"help_option_names": ["--help", "-h"]})
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output config file path.  [default: goodreads_config.json]",
)
@click.option(
    "--user-id",
    default=None,
    help="Your Goodreads user ID (found in the URL on goodreads.com/review/import).",
)
@click.option(
    "--firefox-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Firefox directory to search for cookies.sqlite. Defaults to the platform location.",
)
@click.option(
    "--database-index",
    type=click.IntRange(min=0),
    default=None,
    help="Pick this cookie database without prompting when several are found.",
)
@click.option(
    "--log-level",
    type=click.Choice(get_valid_log_levels(), case_sensitive=False),
    default=None,
    help="Set the logging level for detailed output.  [default: INFO]",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a log file. When omitted, logging is disabled.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress progress output. Errors and prompts are still shown.",
)
@click.version_option(__version__, prog_name="goodreads-cookies")
def cli(
    output: Path | None,
    user_id: str | None,
    firefox_dir: Path | None,
    database_index: int | None,
    log_level: str | None,
    log_file: Path | None,
    quiet: bool,
) -> None:
    """
    Extract Goodreads cookies from Firefox and write a config file.

    The config holds your Goodreads user ID and cookie header and is read by
    the Goodreads-to-Libby tagging tool. You must be logged in to
    goodreads.com in Firefox.

    \b
    Examples:
      # Write goodreads_config.json in the current directory
      goodreads-cookies

      # Choose the output path and skip the user ID lookup
      goodreads-cookies --output ~/goodreads_config.json --user-id 12345678
    """
    settings = ExtractorSettings()
    log_file = log_file or settings.log_file
    setup_logger(
        "GoodreadsCookies",
        log_level or settings.log_level,
        log_file=str(log_file) if log_file else None,
    )
    logger = get_logger("GoodreadsCookies.CLI")

    options = ExtractionOptions(
        output=output or settings.output,
        user_id=user_id,
        firefox_dir=firefox_dir or settings.firefox_dir,
        database_index=database_index,
    )
    display = ExtractorDisplay(quiet=quiet)

    try:
        with exit_on_sigterm():
            CookieExtractor(display).run(options)
    except GoodreadsCookiesError as e:
        logger.error(str(e))
        display.error(str(e))
        sys.exit(1)


# Entry point for the CLI
def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
