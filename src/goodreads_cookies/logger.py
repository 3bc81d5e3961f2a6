"""
Logging configuration module for goodreads-cookies.

Console output belongs to the Rich display; the logger only writes to a
file when one is requested and discards records otherwise.
"""

import logging


class PrefixFormatter(logging.Formatter):
    """A formatter that marks each record with a short level prefix."""

    LEVEL_PREFIXES = {
        logging.DEBUG: "[D]",
        logging.INFO: "[*]",
        logging.WARNING: "[-]",
        logging.ERROR: "[#]",
        logging.CRITICAL: "[!]",
    }

    def format(self, record: logging.LogRecord) -> str:
        prefix = self.LEVEL_PREFIXES.get(record.levelno, "[?]")
        message = f"[{self.formatTime(record, self.datefmt)}] {prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logger(
    name: str = "GoodreadsCookies",
    level: str = "INFO",
    log_file: str | None = None,
) -> logging.Logger:
    """
    Set up a logger with the specified name and level.

    Args:
        name: The name of the logger
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of a file to append records to. When omitted the
            logger gets a NullHandler and records are discarded.

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(PrefixFormatter(datefmt="%d/%b/%Y %H:%M:%S"))
    else:
        handler = logging.NullHandler()
    handler.setLevel(numeric_level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = "GoodreadsCookies") -> logging.Logger:
    """Get an existing logger or create a new one if it doesn't exist."""
    return logging.getLogger(name)


def get_valid_log_levels() -> list[str]:
    """Return a list of valid log level names."""
    return ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
