"""
Day 7: The Treachery of Whales

Crab submarines sit at the given horizontal positions and must all move to
the same position. The positions are kept as a histogram so the cost of
every candidate position is one matrix product.

- Challenge one: moving n steps costs n fuel.
- Challenge two: moving n steps costs 1 + 2 + ... + n = n (n + 1) / 2 fuel.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from ..utils.cli import run_day

DAY = 7


def parse_input(text: str) -> np.ndarray:
    """
    Histogram of crab positions: entry i is the number of crabs at i.
    """
    try:
        positions = [int(v) for v in text.strip().split(",")]
    except ValueError as exc:
        raise ValueError(f"could not parse positions: {text.strip()!r}") from exc
    if not positions:
        raise ValueError("no crab positions given")
    if min(positions) < 0:
        raise ValueError("crab positions must be non-negative")
    return np.bincount(positions).astype(np.int64)


def linear_cost(distance: np.ndarray) -> np.ndarray:
    return distance


def triangular_cost(distance: np.ndarray) -> np.ndarray:
    return distance * (distance + 1) // 2


def alignment_costs(
    counts: np.ndarray,
    cost: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    """
    Total fuel needed to align on each position in [0, len(counts)).
    """
    positions = np.arange(len(counts), dtype=np.int64)
    distance = np.abs(positions[:, None] - positions[None, :])
    return cost(distance) @ counts


def challenge_one(counts: np.ndarray) -> int:
    return int(alignment_costs(counts, linear_cost).min())


def challenge_two(counts: np.ndarray) -> int:
    return int(alignment_costs(counts, triangular_cost).min())


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
