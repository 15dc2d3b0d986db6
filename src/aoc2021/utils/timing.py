"""
Simple timing helpers for the Advent of Code 2021 day solvers.

These utilities provide a lightweight way to measure how long a day takes
to parse and solve an input. They have no external dependencies beyond the
standard library, so they can be used in scripts, notebooks, and tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import time


# ---------------------------------------------------------------------------
# Context-manager timer
# ---------------------------------------------------------------------------

@dataclass
class Timer:
    """
    Context manager for measuring wall-clock time of a code block.

    Usage
    -----
        from aoc2021.utils.timing import Timer

        with Timer("day 15"):
            day15.challenge_two(grid)

    Attributes
    ----------
    name:
        Optional label printed when exiting the context.
    quiet:
        If True, nothing is printed; read `elapsed` instead.
    start:
        Start time (perf_counter units).
    end:
        End time (perf_counter units).
    elapsed:
        Duration in seconds (float). Available after the context exits.
    """

    name: Optional[str] = None
    quiet: bool = False
    start: float = 0.0
    end: float = 0.0
    elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        if self.quiet:
            return
        label = f"[Timer] {self.name}: " if self.name else "[Timer] "
        print(f"{label}{self.elapsed:.4f} s")


def time_block(name: Optional[str] = None, quiet: bool = False) -> Timer:
    """
    Convenience function to create a `Timer` context manager with a name.

    Example
    -------
        from aoc2021.utils.timing import time_block

        with time_block("day 18 challenge two"):
            day18.challenge_two(numbers)
    """
    return Timer(name=name, quiet=quiet)


__all__ = [
    "Timer",
    "time_block",
]
