"""
Day 11: Dumbo Octopus

A 10x10 grid of energy levels. Each step:

1. every octopus gains one energy,
2. any octopus above the flash level flashes, giving one energy to all
   eight neighbours (which may make them flash too, at most once each),
3. every octopus that flashed resets to 0.
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config import OCTOPUS_FLASH_LEVEL, OCTOPUS_MAX_STEPS, OCTOPUS_STEPS
from ..utils.cli import run_day

DAY = 11


def parse_input(text: str) -> np.ndarray:
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("energy grid is empty")
    width = len(lines[0])
    for line in lines:
        if len(line) != width or not line.isdigit():
            raise ValueError(f"invalid energy row: {line!r}")
    return np.array([[int(c) for c in line] for line in lines], dtype=np.int64)


def _neighbour_counts(mask: np.ndarray) -> np.ndarray:
    """
    For each cell, the number of its eight neighbours set in `mask`.
    """
    padded = np.pad(mask.astype(np.int64), 1)
    n_rows, n_cols = mask.shape
    total = np.zeros(mask.shape, dtype=np.int64)
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            total += padded[1 + dr:1 + dr + n_rows, 1 + dc:1 + dc + n_cols]
    return total


def step(energy: np.ndarray) -> int:
    """
    Advance `energy` one step in place and return the number of flashes.
    """
    energy += 1
    flashed = np.zeros(energy.shape, dtype=bool)
    while True:
        new = (energy > OCTOPUS_FLASH_LEVEL) & ~flashed
        if not new.any():
            break
        flashed |= new
        energy += _neighbour_counts(new)
    energy[flashed] = 0
    return int(flashed.sum())


def count_flashes(energy: np.ndarray, steps: int) -> int:
    grid = energy.copy()
    return sum(step(grid) for _ in range(steps))


def challenge_one(energy: np.ndarray) -> int:
    return count_flashes(energy, OCTOPUS_STEPS)


def challenge_two(energy: np.ndarray) -> int:
    grid = energy.copy()
    for n in range(1, OCTOPUS_MAX_STEPS + 1):
        if step(grid) == grid.size:
            return n
    raise RuntimeError(f"No synchronised flash within {OCTOPUS_MAX_STEPS} steps")


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
