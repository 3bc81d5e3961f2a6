"""
goodreads-cookies CLI module.

This module provides the Click-based command-line interface.
"""

from .commands import cli, main


__all__ = ["cli", "main"]
