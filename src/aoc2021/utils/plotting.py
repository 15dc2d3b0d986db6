"""
Visualization helpers for the Advent of Code 2021 day solvers.

These helpers are thin convenience wrappers around matplotlib for the
puzzles whose state is easier to read as a picture:

- Day 13: the folded transparent paper, which spells an activation code.
- Day 5: the vent diagram, as an overlap heat map.
- Day 9: the height map, with its low points marked.

Typical usage in a notebook
---------------------------

    import matplotlib.pyplot as plt
    from aoc2021.days import day09
    from aoc2021.utils.io import read_input
    from aoc2021.utils.plotting import plot_height_map

    heights = day09.parse_input(read_input(9, "sample"))
    fig, ax = plt.subplots(figsize=(8, 4))
    plot_height_map(heights, low_points=day09.low_points(heights), ax=ax)

You remain in control of figure creation and display.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _dots_to_grid(dots: Iterable[Tuple[int, int]]) -> np.ndarray:
    """
    Rasterize (x, y) dots into a 0/1 array indexed as [y, x].
    """
    dots = list(dots)
    width = max(x for x, _ in dots) + 1
    height = max(y for _, y in dots) + 1
    grid = np.zeros((height, width), dtype=np.uint8)
    for x, y in dots:
        grid[y, x] = 1
    return grid


# ---------------------------------------------------------------------------
# Public plotting helpers
# ---------------------------------------------------------------------------

def plot_dot_grid(
    dots: Iterable[Tuple[int, int]],
    ax=None,
    title: Optional[str] = None,
):
    """
    Plot dots on transparent paper as black squares on white.

    Parameters
    ----------
    dots:
        Iterable of (x, y) dot coordinates, y growing downwards.
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    title:
        Optional plot title.
    """
    dots = list(dots)
    if not dots:
        raise ValueError("plot_dot_grid called with no dots.")

    grid = _dots_to_grid(dots)
    if ax is None:
        height, width = grid.shape
        _, ax = plt.subplots(figsize=(max(width / 4, 2), max(height / 4, 1)))

    ax.imshow(grid, cmap="Greys", interpolation="nearest")
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    if title is not None:
        ax.set_title(title)

    return ax


def plot_vent_diagram(
    counts: np.ndarray,
    ax=None,
    title: Optional[str] = None,
):
    """
    Plot a vent diagram (number of lines covering each point) as a heat map.

    `counts` is indexed as [y, x], as returned by `day05.vent_diagram`.
    """
    if counts.ndim != 2:
        raise ValueError(f"Expected a 2D count array, got shape {counts.shape}.")

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    image = ax.imshow(counts, cmap="viridis", interpolation="nearest")
    ax.figure.colorbar(image, ax=ax, label="overlapping lines")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if title is not None:
        ax.set_title(title)

    return ax


def plot_height_map(
    heights: np.ndarray,
    low_points: Optional[Sequence[Tuple[int, int]]] = None,
    ax=None,
    title: Optional[str] = None,
):
    """
    Plot a height map, optionally marking its low points.

    Parameters
    ----------
    heights:
        2D array of heights 0..9.
    low_points:
        Optional (row, col) coordinates to mark with a cross.
    ax:
        Optional matplotlib Axes. If None, a new figure and axes are created.
    title:
        Optional plot title.
    """
    if heights.ndim != 2:
        raise ValueError(f"Expected a 2D height map, got shape {heights.shape}.")

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 4))

    ax.imshow(heights, cmap="terrain", vmin=0, vmax=9, interpolation="nearest")
    if low_points:
        rows = [r for r, _ in low_points]
        cols = [c for _, c in low_points]
        ax.scatter(cols, rows, marker="x", color="red", s=30)
    ax.axis("off")
    if title is not None:
        ax.set_title(title)

    return ax


__all__ = [
    "plot_dot_grid",
    "plot_vent_diagram",
    "plot_height_map",
]
