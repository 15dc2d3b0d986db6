"""
Day 1: Sonar Sweep

The input is one depth measurement per line. Challenge one counts how often
a measurement is larger than the previous one; challenge two does the same
for the sums of a sliding window of three measurements.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..config import SONAR_WINDOW
from ..utils.cli import run_day

DAY = 1


def parse_input(text: str) -> List[int]:
    depths: List[int] = []
    for lineno, line in enumerate(text.strip().splitlines(), 1):
        try:
            depths.append(int(line))
        except ValueError as exc:
            raise ValueError(f"could not parse line {lineno}: {line!r}") from exc
    return depths


def count_increases(values: Sequence[int]) -> int:
    """
    Number of elements that are strictly larger than their predecessor.
    """
    arr = np.asarray(values, dtype=np.int64)
    return int(np.count_nonzero(np.diff(arr) > 0))


def window_sums(values: Sequence[int], width: int = SONAR_WINDOW) -> np.ndarray:
    arr = np.asarray(values, dtype=np.int64)
    if len(arr) < width:
        return np.empty(0, dtype=np.int64)
    return np.convolve(arr, np.ones(width, dtype=np.int64), mode="valid")


def challenge_one(depths: Sequence[int]) -> int:
    return count_increases(depths)


def challenge_two(depths: Sequence[int]) -> int:
    return count_increases(window_sums(depths))


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
