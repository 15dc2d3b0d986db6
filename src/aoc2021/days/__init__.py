"""
Solvers for the Advent of Code 2021 puzzle days.

Every module `dayNN` here is an independent command-line entry point:

    python -m aoc2021.days.day01

and exposes the same small surface:

- `DAY`: the puzzle day number
- `parse_input(text)`: parse the raw puzzle input
- `challenge_one(data)` / `challenge_two(data)`: the two answers
- `main(argv=None)`: the CLI

The modules never import each other.
"""

from __future__ import annotations

import importlib
from types import ModuleType

from ..config import DAYS


def module_name(day: int) -> str:
    """
    Fully qualified module name for `day`, e.g. 'aoc2021.days.day05'.
    """
    return f"{__name__}.day{day:02d}"


def load_day(day: int) -> ModuleType:
    """
    Import and return the module solving `day`.
    """
    if day not in DAYS:
        raise ValueError(f"day must be one of {list(DAYS)}, got {day}")
    return importlib.import_module(module_name(day))


__all__ = [
    "module_name",
    "load_day",
]
