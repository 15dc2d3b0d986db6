"""
Day 17: Trick Shot

A probe is launched from (0, 0) with an integer initial velocity
(vx, vy). Each step it moves by its velocity, then drag pulls vx one
towards 0 and gravity lowers vy by one.

Both axes have closed forms, so the position after `t` steps never needs
to be simulated step by step:

    y(t) = t * vy - t * (t - 1) / 2
    x(t) = y-formula with vx while t < vx, then fixed at vx * (vx + 1) / 2

for vx >= 0; a negative vx mirrors the positive one.

Every candidate velocity within the bounds set by the target is checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..utils.cli import run_day

DAY = 17

_TARGET_RE = re.compile(
    r"^target area:\s*x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+)\s*$"
)

Velocity = Tuple[int, int]


@dataclass(frozen=True)
class Target:
    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


def parse_input(text: str) -> Target:
    match = _TARGET_RE.match(text.strip())
    if not match:
        raise ValueError(f"malformed target area ({text.strip()})")
    x0, x1, y0, y1 = (int(g) for g in match.groups())
    return Target(min(x0, x1), max(x0, x1), min(y0, y1), max(y0, y1))


def vertical_position_at(vy: int, t: int) -> int:
    return t * vy - t * (t - 1) // 2


def horizontal_position_at(vx: int, t: int) -> int:
    """
    x position after `t` steps. Drag is symmetric, so a negative `vx` is
    the mirror image of the positive one.
    """
    if vx < 0:
        return -horizontal_position_at(-vx, t)
    if t >= vx:
        return vx * (vx + 1) // 2
    return t * vx - t * (t - 1) // 2


def vertical_apogee(vy: int) -> int:
    """
    Highest y reached by a probe launched with vertical velocity `vy`.
    """
    if vy <= 0:
        return 0
    return vy * (vy + 1) // 2


def hits(target: Target, vx: int, vy: int) -> bool:
    t = 0
    while True:
        t += 1
        x = horizontal_position_at(vx, t)
        y = vertical_position_at(vy, t)
        if target.contains(x, y):
            return True
        # Past the target and still moving away from it on either axis.
        if vx >= 0 and x > target.x_max:
            return False
        if vx <= 0 and x < target.x_min:
            return False
        if y < target.y_min and t > vy:
            return False


def hitting_velocities(target: Target) -> Iterator[Velocity]:
    vy_low = min(target.y_min, 0)
    vy_high = max(abs(target.y_min), abs(target.y_max))
    for vx in range(min(target.x_min, 0), max(target.x_max, 0) + 1):
        for vy in range(vy_low, vy_high + 1):
            if hits(target, vx, vy):
                yield vx, vy


def challenge_one(target: Target) -> int:
    apogees = [vertical_apogee(vy) for _, vy in hitting_velocities(target)]
    if not apogees:
        raise RuntimeError("No initial velocity hits the target area")
    return max(apogees)


def challenge_two(target: Target) -> int:
    return sum(1 for _ in hitting_velocities(target))


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
