"""
Day 5: Hydrothermal Venture

Each input line describes a line of vents, `x1,y1 -> x2,y2`. Lines are
horizontal, vertical or at exactly 45 degrees.

The vent diagram is a 2D count array indexed as `[y, x]`; both challenges
count the cells covered by at least two lines. Challenge one only draws
horizontal and vertical lines, challenge two draws all of them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..utils.cli import run_day

DAY = 5

Point = Tuple[int, int]

_LINE_RE = re.compile(r"^\s*(\d+),(\d+)\s*->\s*(\d+),(\d+)\s*$")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point

    @property
    def is_horizontal(self) -> bool:
        return self.start[1] == self.end[1]

    @property
    def is_vertical(self) -> bool:
        return self.start[0] == self.end[0]

    @property
    def is_cardinal(self) -> bool:
        return self.is_horizontal or self.is_vertical

    @property
    def is_diagonal(self) -> bool:
        return not self.is_cardinal

    def points(self) -> List[Point]:
        """
        Every point covered by the line, walking from `start` to `end`.
        """
        (x0, y0), (x1, y1) = self.start, self.end
        dx, dy = _sign(x1 - x0), _sign(y1 - y0)
        length = max(abs(x1 - x0), abs(y1 - y0))
        return [(x0 + i * dx, y0 + i * dy) for i in range(length + 1)]


def parse_line(text: str) -> Line:
    match = _LINE_RE.match(text)
    if match is None:
        raise ValueError(f"malformed vent line: {text!r}")
    x0, y0, x1, y1 = (int(v) for v in match.groups())
    line = Line((x0, y0), (x1, y1))
    if line.is_diagonal and abs(x1 - x0) != abs(y1 - y0):
        raise ValueError(f"vent line is not at 45 degrees: {text!r}")
    return line


def parse_input(text: str) -> List[Line]:
    return [parse_line(line) for line in text.strip().splitlines()]


def vent_diagram(lines: Iterable[Line]) -> np.ndarray:
    """
    Count array of shape (max_y + 1, max_x + 1): how many lines cover each cell.
    """
    points = [p for line in lines for p in line.points()]
    if not points:
        return np.zeros((0, 0), dtype=np.int64)

    xs = np.array([p[0] for p in points])
    ys = np.array([p[1] for p in points])
    counts = np.zeros((ys.max() + 1, xs.max() + 1), dtype=np.int64)
    np.add.at(counts, (ys, xs), 1)
    return counts


def render_diagram(lines: Iterable[Line]) -> str:
    """
    Text drawing of the vent diagram as shown in the puzzle: overlap counts,
    with '.' where no line passes. Every row ends with a newline.
    """
    counts = vent_diagram(lines)
    return "".join(
        "".join(str(c) if c else "." for c in row) + "\n" for row in counts
    )


def count_overlaps(lines: Iterable[Line]) -> int:
    return int(np.count_nonzero(vent_diagram(lines) > 1))


def challenge_one(lines: Sequence[Line]) -> int:
    return count_overlaps(line for line in lines if line.is_cardinal)


def challenge_two(lines: Sequence[Line]) -> int:
    return count_overlaps(lines)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
