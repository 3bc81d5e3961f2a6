"""Strategies for choosing one cookie database out of the candidates found."""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

import click

from .display import ExtractorDisplay
from .utils.exceptions import SelectionError


IndexPrompt = Callable[[int], int]


class DatabaseSelector(Protocol):
    """Choose one database path from a non-empty sequence of candidates."""

    def select(self, candidates: Sequence[Path]) -> Path: ...


class AutomaticSelector:
    """Picks the only candidate."""

    def __init__(self, display: ExtractorDisplay):
        self.display = display

    def select(self, candidates: Sequence[Path]) -> Path:
        if len(candidates) != 1:
            raise SelectionError(f"Expected exactly one cookie database, found {len(candidates)}")
        self.display.info(f"Found cookies DB: {candidates[0]}")
        return candidates[0]


class PreselectedSelector:
    """Picks the candidate at a fixed index, e.g. from ``--database-index``."""

    def __init__(self, index: int, display: ExtractorDisplay):
        self.index = index
        self.display = display

    def select(self, candidates: Sequence[Path]) -> Path:
        if not 0 <= self.index < len(candidates):
            raise SelectionError(
                f"Database index {self.index} is out of range (0-{len(candidates) - 1})"
            )
        database = candidates[self.index]
        self.display.info(f"Using cookies DB [{self.index}]: {database}")
        return database


def prompt_for_index(count: int) -> int:
    """Ask the operator for an index, re-prompting until it is in range."""
    return click.prompt(
        f"Pick one [0-{count - 1}]",
        type=click.IntRange(0, count - 1),
        err=True,
    )


class InteractiveSelector:
    """Lists the candidates and asks the operator to pick one."""

    def __init__(self, display: ExtractorDisplay, prompt: IndexPrompt = prompt_for_index):
        self.display = display
        self.prompt = prompt

    def select(self, candidates: Sequence[Path]) -> Path:
        self.display.candidates(candidates)
        index = self.prompt(len(candidates))
        if not 0 <= index < len(candidates):
            raise SelectionError(
                f"Database index {index} is out of range (0-{len(candidates) - 1})"
            )
        return candidates[index]


def choose_selector(
    candidates: Sequence[Path],
    display: ExtractorDisplay,
    index: int | None = None,
    prompt: IndexPrompt = prompt_for_index,
) -> DatabaseSelector:
    """Return the selection strategy that fits the candidates and options."""
    if index is not None:
        return PreselectedSelector(index, display)
    if len(candidates) == 1:
        return AutomaticSelector(display)
    return InteractiveSelector(display, prompt)
