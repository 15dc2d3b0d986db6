"""
Day 9: Smoke Basin

The height map is a 2D array of digits. A low point is lower than all of
its orthogonal neighbours; its risk level is its height plus one.

A basin is every location that flows down to a single low point. Height 9
never belongs to a basin, so each basin is the 4-connected region of
non-9 cells around its low point.
"""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Tuple

import numpy as np

from ..utils.cli import run_day

DAY = 9

MAX_HEIGHT = 9

Coordinate = Tuple[int, int]


def parse_input(text: str) -> np.ndarray:
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("height map is empty")
    width = len(lines[0])
    for line in lines:
        if len(line) != width or not line.isdigit():
            raise ValueError(f"invalid height map row: {line!r}")
    return np.array([[int(c) for c in line] for line in lines], dtype=np.int64)


def low_point_mask(heights: np.ndarray) -> np.ndarray:
    padded = np.pad(heights, 1, constant_values=MAX_HEIGHT + 1)
    center = padded[1:-1, 1:-1]
    return (
        (center < padded[:-2, 1:-1])
        & (center < padded[2:, 1:-1])
        & (center < padded[1:-1, :-2])
        & (center < padded[1:-1, 2:])
    )


def low_points(heights: np.ndarray) -> List[Coordinate]:
    """
    (row, col) of every low point, in row-major order.
    """
    return [(int(r), int(c)) for r, c in np.argwhere(low_point_mask(heights))]


def basin_size(heights: np.ndarray, start: Coordinate) -> int:
    n_rows, n_cols = heights.shape
    seen = {start}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if not (0 <= nr < n_rows and 0 <= nc < n_cols):
                continue
            if (nr, nc) in seen or heights[nr, nc] == MAX_HEIGHT:
                continue
            seen.add((nr, nc))
            queue.append((nr, nc))
    return len(seen)


def challenge_one(heights: np.ndarray) -> int:
    return int((heights[low_point_mask(heights)] + 1).sum())


def challenge_two(heights: np.ndarray) -> int:
    sizes = sorted((basin_size(heights, p) for p in low_points(heights)), reverse=True)
    if len(sizes) < 3:
        raise RuntimeError(f"expected at least 3 basins, found {len(sizes)}")
    return sizes[0] * sizes[1] * sizes[2]


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
