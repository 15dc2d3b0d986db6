"""
Day 14: Extended Polymerization

A polymer template and pair insertion rules `AB -> C`. Every step inserts
`C` between each adjacent `AB` pair at once.

Challenge one grows the polymer literally for 10 steps. The polymer
doubles in length every step, so challenge two (40 steps) only tracks how
often each adjacent pair occurs; each element is then counted as the
first element of a pair, plus the template's last element, which never
changes.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..config import POLYMER_STEPS_ONE, POLYMER_STEPS_TWO
from ..utils.cli import run_day

DAY = 14

Rules = Dict[str, str]


@dataclass(frozen=True)
class Manual:
    template: str
    rules: Rules


def parse_input(text: str) -> Manual:
    lines = [line.strip() for line in text.strip().splitlines()]
    if not lines or not lines[0]:
        raise ValueError("missing polymer template")
    template = lines[0]
    rules: Rules = {}
    for line in lines[1:]:
        if not line:
            continue
        pair, sep, element = (part.strip() for part in line.partition("->"))
        if not sep or len(pair) != 2 or len(element) != 1:
            raise ValueError(f"malformed insertion rule ({line})")
        rules[pair] = element
    return Manual(template, rules)


class Polymer:
    """
    A polymer held as a plain string.
    """

    def __init__(self, template: str, rules: Rules):
        self.chain = template
        self.rules = rules

    def grow(self) -> None:
        out = [self.chain[0]]
        for a, b in zip(self.chain, self.chain[1:]):
            inserted = self.rules.get(a + b)
            if inserted is not None:
                out.append(inserted)
            out.append(b)
        self.chain = "".join(out)

    def counts(self) -> Counter:
        return Counter(self.chain)


class PairCounters:
    """
    A polymer held as counts of its adjacent pairs.
    """

    def __init__(self, template: str, rules: Rules):
        self.pairs: Counter = Counter(a + b for a, b in zip(template, template[1:]))
        self.last = template[-1]
        self.rules = rules

    def grow(self) -> None:
        grown: Counter = Counter()
        for pair, n in self.pairs.items():
            inserted = self.rules.get(pair)
            if inserted is None:
                grown[pair] += n
            else:
                grown[pair[0] + inserted] += n
                grown[inserted + pair[1]] += n
        self.pairs = grown

    def counts(self) -> Counter:
        elements: Counter = Counter({self.last: 1})
        for pair, n in self.pairs.items():
            elements[pair[0]] += n
        return elements


def spread(counts: Counter) -> int:
    """
    Most common element count minus least common element count.
    """
    values = counts.values()
    return max(values) - min(values)


def challenge_one(manual: Manual) -> int:
    polymer = Polymer(manual.template, manual.rules)
    for _ in range(POLYMER_STEPS_ONE):
        polymer.grow()
    return spread(polymer.counts())


def challenge_two(manual: Manual) -> int:
    polymer = PairCounters(manual.template, manual.rules)
    for _ in range(POLYMER_STEPS_TWO):
        polymer.grow()
    return spread(polymer.counts())


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
