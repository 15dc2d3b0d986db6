"""
Day 6: Lanternfish

Every fish is described only by its timer, so the school is tracked as a
histogram of timers (index = days until it spawns) instead of one entry
per fish. A day shifts the histogram down by one; fish at 0 reset to 6 and
spawn the same number of new fish at 8.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config import (
    LANTERNFISH_DAYS_ONE,
    LANTERNFISH_DAYS_TWO,
    LANTERNFISH_NEW_TIMER,
    LANTERNFISH_RESET_TIMER,
)
from ..utils.cli import run_day

DAY = 6


def parse_input(text: str) -> np.ndarray:
    """
    Parse the comma separated timers into a histogram of length 9.
    """
    try:
        timers = [int(v) for v in text.strip().split(",")]
    except ValueError as exc:
        raise ValueError(f"could not parse timers: {text.strip()!r}") from exc

    if any(t < 0 or t > LANTERNFISH_NEW_TIMER for t in timers):
        raise ValueError(f"timers must be in [0, {LANTERNFISH_NEW_TIMER}]")
    return np.bincount(timers, minlength=LANTERNFISH_NEW_TIMER + 1).astype(np.int64)


def simulate(histogram: np.ndarray, days: int) -> np.ndarray:
    counts = histogram.copy()
    for _ in range(days):
        spawning = counts[0]
        counts = np.roll(counts, -1)
        # np.roll already moved the spawning fish to the newborn slot.
        counts[LANTERNFISH_RESET_TIMER] += spawning
    return counts


def population_after(histogram: np.ndarray, days: int) -> int:
    return int(simulate(histogram, days).sum())


def challenge_one(histogram: np.ndarray) -> int:
    return population_after(histogram, LANTERNFISH_DAYS_ONE)


def challenge_two(histogram: np.ndarray) -> int:
    return population_after(histogram, LANTERNFISH_DAYS_TWO)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
