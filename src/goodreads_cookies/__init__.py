"""Extract Goodreads cookies from Firefox into a config file."""

__version__ = "1.0.0"
