"""Constants for the Rich display."""

# Rich markup styles for different message types
STYLES = {
    "success": "bold green",
    "error": "bold red",
    "index": "bold cyan",
    "path": "white",
}

USER_ID_HELP_URL = "https://www.goodreads.com/review/import"
