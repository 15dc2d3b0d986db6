"""
Day 2: Dive!

Each line is a submarine command: `forward N`, `down N` or `up N`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..utils.cli import run_day

DAY = 2

COMMANDS = ("forward", "down", "up")


@dataclass(frozen=True)
class Instruction:
    command: str
    value: int

    @classmethod
    def from_line(cls, line: str) -> "Instruction":
        parts = line.split()
        if len(parts) != 2 or parts[0] not in COMMANDS:
            raise ValueError(f"malformed instruction ({line})")
        try:
            value = int(parts[1])
        except ValueError as exc:
            raise ValueError(f"malformed instruction ({line})") from exc
        return cls(command=parts[0], value=value)


def parse_input(text: str) -> List[Instruction]:
    return [Instruction.from_line(line) for line in text.strip().splitlines()]


def challenge_one(instructions: Sequence[Instruction]) -> int:
    horizontal = depth = 0
    for ins in instructions:
        if ins.command == "forward":
            horizontal += ins.value
        elif ins.command == "down":
            depth += ins.value
        else:
            depth -= ins.value
    return horizontal * depth


def challenge_two(instructions: Sequence[Instruction]) -> int:
    # "down" and "up" only steer; depth changes when moving forward.
    horizontal = depth = aim = 0
    for ins in instructions:
        if ins.command == "forward":
            horizontal += ins.value
            depth += aim * ins.value
        elif ins.command == "down":
            aim += ins.value
        else:
            aim -= ins.value
    return horizontal * depth


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
