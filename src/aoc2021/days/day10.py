"""
Day 10: Syntax Scoring

Each line is a sequence of chunk brackets. Validating a line with a stack
of expected closers gives one of three results:

- ok: every chunk is closed
- corrupted: a closer doesn't match the innermost open chunk
- incomplete: the line ends with chunks still open

Challenge one scores the first illegal character of corrupted lines;
challenge two scores the completion strings of incomplete lines and takes
the median.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..utils.cli import run_day

DAY = 10

PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSERS = frozenset(PAIRS.values())

SYNTAX_ERROR_SCORE = {")": 3, "]": 57, "}": 1197, ">": 25137}
COMPLETION_SCORE = {")": 1, "]": 2, "}": 3, ">": 4}

OK = "ok"
INCOMPLETE = "incomplete"
CORRUPTED = "corrupted"


@dataclass(frozen=True)
class LineResult:
    status: str
    # Closers needed to finish the line, innermost first (incomplete lines).
    missing: str = ""
    # Details of the first illegal character (corrupted lines).
    expected: Optional[str] = None
    found: Optional[str] = None
    position: Optional[int] = None


def parse_input(text: str) -> List[str]:
    lines = text.strip().splitlines()
    for line in lines:
        bad = set(line) - set(PAIRS) - CLOSERS
        if bad:
            raise ValueError(f"unexpected character {sorted(bad)[0]!r} in line {line!r}")
    return lines


def validate_line(line: str) -> LineResult:
    stack: List[str] = []
    for position, char in enumerate(line):
        if char in PAIRS:
            stack.append(PAIRS[char])
            continue
        if not stack:
            raise ValueError(f"unopened chunk with bracket {char!r} at position {position}")
        expected = stack.pop()
        if char != expected:
            return LineResult(CORRUPTED, expected=expected, found=char, position=position)

    if stack:
        return LineResult(INCOMPLETE, missing="".join(reversed(stack)))
    return LineResult(OK)


def completion_score(missing: str) -> int:
    score = 0
    for char in missing:
        score = score * 5 + COMPLETION_SCORE[char]
    return score


def challenge_one(lines: Sequence[str]) -> int:
    total = 0
    for line in lines:
        result = validate_line(line)
        if result.status == CORRUPTED:
            total += SYNTAX_ERROR_SCORE[result.found]
    return total


def challenge_two(lines: Sequence[str]) -> int:
    scores = sorted(
        completion_score(result.missing)
        for result in map(validate_line, lines)
        if result.status == INCOMPLETE
    )
    if not scores:
        raise RuntimeError("no incomplete lines to score")
    return scores[(len(scores) - 1) // 2]


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
