"""
Day 13: Transparent Origami

The input is a list of dots `x,y` followed by fold instructions
`fold along x=N` / `fold along y=N`. Folding along `x=N` maps every dot
with `x > N` to `2N - x` (likewise for y); dots on the fold line itself
are dropped.

Challenge one counts the dots after the first fold. Challenge two applies
every fold and counts the remaining dots; the code they spell can be read
with `render_dots` or plotted with `--plot`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from ..utils.cli import build_arg_parser, process, resolve_inputs
from ..utils.io import read_input
from ..utils.timing import time_block

DAY = 13

Dot = Tuple[int, int]

_FOLD_RE = re.compile(r"^fold along ([xy])=(\d+)$")


@dataclass(frozen=True)
class Fold:
    axis: str
    line: int

    def apply(self, dots: FrozenSet[Dot]) -> FrozenSet[Dot]:
        folded = set()
        for x, y in dots:
            v = x if self.axis == "x" else y
            if v == self.line:
                continue
            if v > self.line:
                v = 2 * self.line - v
            folded.add((v, y) if self.axis == "x" else (x, v))
        return frozenset(folded)


@dataclass(frozen=True)
class Manual:
    dots: FrozenSet[Dot]
    folds: Tuple[Fold, ...]


def parse_input(text: str) -> Manual:
    dots = set()
    folds = []
    for line in text.strip().splitlines():
        line = line.strip()
        if not line:
            continue
        match = _FOLD_RE.match(line)
        if match:
            folds.append(Fold(match.group(1), int(match.group(2))))
            continue
        parts = line.split(",")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError(f"malformed dot or fold ({line})")
        dots.add((int(parts[0]), int(parts[1])))
    if not folds:
        raise ValueError("manual has no fold instructions")
    return Manual(frozenset(dots), tuple(folds))


def fold_all(dots: FrozenSet[Dot], folds: Sequence[Fold]) -> FrozenSet[Dot]:
    for fold in folds:
        dots = fold.apply(dots)
    return dots


def render_dots(dots: FrozenSet[Dot]) -> str:
    """
    Draw the dots as rows of '#' and ' ', one line per row.
    """
    if not dots:
        return ""
    width = max(x for x, _ in dots) + 1
    height = max(y for _, y in dots) + 1
    rows = []
    for y in range(height):
        rows.append("".join("#" if (x, y) in dots else " " for x in range(width)))
    return "\n".join(rows) + "\n"


def challenge_one(manual: Manual) -> int:
    return len(manual.folds[0].apply(manual.dots))


def challenge_two(manual: Manual) -> int:
    return len(fold_all(manual.dots, manual.folds))


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_arg_parser(DAY)
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Show the folded paper with matplotlib.",
    )
    args = parser.parse_args(argv)

    codes = {}
    for name, text in resolve_inputs(DAY, args):
        if text is None:
            text = read_input(DAY, name)
        with time_block(f"day {DAY} ({name})", quiet=not args.time):
            manual = parse_input(text)
            process(DAY, name, lambda _: manual, challenge_one, challenge_two, text=text)
        codes[name] = fold_all(manual.dots, manual.folds)
        print(render_dots(codes[name]), end="")

    if args.plot:
        import matplotlib.pyplot as plt

        from ..utils.plotting import plot_dot_grid

        for name, dots in codes.items():
            plot_dot_grid(dots, title=f"Day {DAY} ({name})")
        plt.show()


if __name__ == "__main__":
    main()
