"""
Day 15: Chiton

Find the lowest total risk of any path from the top-left to the
bottom-right of the risk map, moving orthogonally. The risk of the start
cell is not counted because it is never entered.

For challenge two the map is tiled 5x5; each tile to the right or below
adds one to every risk level, wrapping from 9 back to 1.
"""

from __future__ import annotations

import heapq
from typing import List, Optional

import numpy as np

from ..config import CHITON_TILE_FACTOR
from ..utils.cli import run_day

DAY = 15


def parse_input(text: str) -> np.ndarray:
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("risk map is empty")
    width = len(lines[0])
    for line in lines:
        if len(line) != width or not line.isdigit():
            raise ValueError(f"invalid risk map row: {line!r}")
    return np.array([[int(c) for c in line] for line in lines], dtype=np.int64)


def tile_map(risk: np.ndarray, factor: int = CHITON_TILE_FACTOR) -> np.ndarray:
    n_rows, n_cols = risk.shape
    tiled = np.empty((n_rows * factor, n_cols * factor), dtype=risk.dtype)
    for ty in range(factor):
        for tx in range(factor):
            tiled[ty * n_rows:(ty + 1) * n_rows, tx * n_cols:(tx + 1) * n_cols] = (
                (risk + tx + ty - 1) % 9 + 1
            )
    return tiled


def lowest_total_risk(risk: np.ndarray) -> int:
    """
    Dijkstra's algorithm from the top-left to the bottom-right cell.
    """
    n_rows, n_cols = risk.shape
    target = (n_rows - 1, n_cols - 1)
    best = np.full(risk.shape, np.iinfo(np.int64).max, dtype=np.int64)
    best[0, 0] = 0
    queue = [(0, 0, 0)]
    while queue:
        total, r, c = heapq.heappop(queue)
        if (r, c) == target:
            return total
        if total > best[r, c]:
            continue
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if not (0 <= nr < n_rows and 0 <= nc < n_cols):
                continue
            candidate = total + int(risk[nr, nc])
            if candidate < best[nr, nc]:
                best[nr, nc] = candidate
                heapq.heappush(queue, (candidate, nr, nc))
    raise RuntimeError("bottom-right cell is unreachable")


def challenge_one(risk: np.ndarray) -> int:
    return lowest_total_risk(risk)


def challenge_two(risk: np.ndarray) -> int:
    return lowest_total_risk(tile_map(risk))


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
