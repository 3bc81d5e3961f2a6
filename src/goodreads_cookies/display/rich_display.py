"""Rich-based console output for goodreads-cookies."""

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .constants import STYLES, USER_ID_HELP_URL


class ExtractorDisplay:
    """
    Console output for the extraction procedure.

    Progress and prompt context go to stdout; errors go to stderr so that
    scripted callers can tell them apart. Quiet mode silences progress only.
    """

    def __init__(self, quiet: bool = False):
        """
        Initialize ExtractorDisplay.

        Args:
            quiet: If True, suppress all output except errors and prompts
        """
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)
        self.quiet = quiet

    def info(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(escape(message), soft_wrap=True)

    def success(self, message: str) -> None:
        if self.quiet:
            return
        self.console.print(f"[{STYLES['success']}]{escape(message)}[/]", soft_wrap=True)

    def error(self, message: str) -> None:
        self.err_console.print(
            f"[{STYLES['error']}]Error:[/] {escape(message)}",
            soft_wrap=True,
        )

    def candidates(self, databases: Sequence[Path]) -> None:
        """List the cookie databases with the index used to pick one."""
        self.console.print("Found multiple cookies.sqlite files:")
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Index", style=STYLES["index"], no_wrap=True)
        table.add_column("Path", style=STYLES["path"], overflow="fold")
        for idx, database in enumerate(databases):
            table.add_row(escape(f"[{idx}]"), escape(str(database)))
        self.console.print(table)

    def user_id_help(self) -> None:
        """Explain where to find the Goodreads user ID before prompting for it."""
        self.console.print(
            "\nCould not automatically determine your Goodreads user ID.\n"
            f"You can find it by visiting {USER_ID_HELP_URL}\n"
            "and looking at the export URL which contains your numeric user ID.\n",
            soft_wrap=True,
        )
