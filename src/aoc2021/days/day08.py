"""
Day 8: Seven Segment Search

Each entry lists the ten unique signal patterns of one scrambled display,
then the four output digits:

    acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | cdfeb fcadb cdfeb cdbaf

Patterns are stored as frozensets of segment letters, so the order of the
letters doesn't matter.

Deduction
---------
1. Trivial digits by segment count: 1 (2), 7 (3), 4 (4), 8 (7).
2. Six segments: shares 1 segment with "1" -> 6, shares 3 with "4" -> 0,
   otherwise 9.
3. Five segments: shares 2 segments with "1" -> 3, shares 5 with "6" -> 5,
   otherwise 2.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..utils.cli import run_day

DAY = 8

SEGMENTS = frozenset("abcdefg")

Pattern = FrozenSet[str]

# Digits whose segment count alone identifies them.
TRIVIAL_DIGITS: Dict[int, int] = {2: 1, 3: 7, 4: 4, 7: 8}


@dataclass(frozen=True)
class Entry:
    patterns: Tuple[Pattern, ...]
    digits: Tuple[Pattern, ...]


def _parse_patterns(text: str, expected: int) -> Tuple[Pattern, ...]:
    words = text.split()
    if len(words) != expected:
        raise ValueError(f"expected {expected} patterns, got {len(words)}: {text!r}")
    patterns = []
    for word in words:
        pattern = frozenset(word)
        if not pattern or not pattern <= SEGMENTS:
            raise ValueError(f"invalid segment pattern: {word!r}")
        patterns.append(pattern)
    return tuple(patterns)


def parse_entry(line: str) -> Entry:
    left, sep, right = line.partition("|")
    if not sep:
        raise ValueError(f"missing '|' separator: {line!r}")
    return Entry(
        patterns=_parse_patterns(left, 10),
        digits=_parse_patterns(right, 4),
    )


def parse_input(text: str) -> List[Entry]:
    return [parse_entry(line) for line in text.strip().splitlines()]


class EntryDecoder:
    """
    Incrementally deduces which pattern shows which digit for one entry.
    """

    def __init__(self, patterns: Sequence[Pattern]):
        self.patterns = tuple(patterns)
        self.conclusions: Dict[int, Pattern] = {}

    def process_trivial(self) -> None:
        for pattern in self.patterns:
            digit = TRIVIAL_DIGITS.get(len(pattern))
            if digit is not None:
                self.conclusions[digit] = pattern

    def _require(self, digit: int) -> Pattern:
        try:
            return self.conclusions[digit]
        except KeyError:
            raise ValueError(f"pattern for digit {digit} could not be deduced") from None

    def first_inference(self) -> None:
        """
        Deduce 0, 6 and 9 from the patterns of 1 and 4.
        """
        one, four = self._require(1), self._require(4)
        for pattern in self.patterns:
            if len(pattern) != 6:
                continue
            if len(pattern & one) == 1:
                self.conclusions[6] = pattern
            elif len(pattern & four) == 3:
                self.conclusions[0] = pattern
            else:
                self.conclusions[9] = pattern

    def second_inference(self) -> None:
        """
        Deduce 2, 3 and 5 from the patterns of 1 and 6.
        """
        one, six = self._require(1), self._require(6)
        for pattern in self.patterns:
            if len(pattern) != 5:
                continue
            if len(pattern & one) == 2:
                self.conclusions[3] = pattern
            elif len(pattern & six) == 5:
                self.conclusions[5] = pattern
            else:
                self.conclusions[2] = pattern

    def solve(self) -> "EntryDecoder":
        self.process_trivial()
        self.first_inference()
        self.second_inference()
        return self

    def apply(self, display: Sequence[Pattern]) -> List[Optional[int]]:
        """
        Decode each pattern of `display`, None where it is not known yet.
        """
        lookup = {pattern: digit for digit, pattern in self.conclusions.items()}
        return [lookup.get(pattern) for pattern in display]


def decode_output(entry: Entry) -> int:
    digits = EntryDecoder(entry.patterns).solve().apply(entry.digits)
    if any(d is None for d in digits):
        raise ValueError(f"could not decode all output digits of {entry}")
    value = 0
    for digit in digits:
        value = value * 10 + digit
    return value


def challenge_one(entries: Sequence[Entry]) -> int:
    total = 0
    for entry in entries:
        decoder = EntryDecoder(entry.patterns)
        decoder.process_trivial()
        total += sum(d is not None for d in decoder.apply(entry.digits))
    return total


def challenge_two(entries: Sequence[Entry]) -> int:
    return sum(decode_output(entry) for entry in entries)


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
