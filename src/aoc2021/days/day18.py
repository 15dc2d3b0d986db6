"""
Day 18: Snailfish

A snailfish number is a pair whose elements are regular numbers or other
pairs, written like `[[1,2],3]`. They are held here as nested Python
lists of two elements.

Adding two numbers forms the pair `[a, b]` and reduces it: repeatedly
explode the leftmost pair nested inside four pairs, or, if there is none,
split the leftmost regular number of 10 or more.
"""

from __future__ import annotations

import json
from functools import reduce
from itertools import permutations
from typing import List, Optional, Sequence, Tuple, Union

from ..config import SNAILFISH_EXPLODE_DEPTH, SNAILFISH_SPLIT_THRESHOLD
from ..utils.cli import run_day

DAY = 18

Number = Union[int, list]


def _validate(node, line: str) -> None:
    if isinstance(node, bool) or not isinstance(node, (int, list)):
        raise ValueError(f"malformed snailfish number ({line})")
    if isinstance(node, int):
        if node < 0:
            raise ValueError(f"malformed snailfish number ({line})")
        return
    if len(node) != 2:
        raise ValueError(f"snailfish pairs need two elements ({line})")
    for child in node:
        _validate(child, line)


def parse_number(line: str) -> list:
    line = line.strip()
    try:
        number = json.loads(line)
    except json.JSONDecodeError:
        raise ValueError(f"malformed snailfish number ({line})") from None
    if not isinstance(number, list):
        raise ValueError(f"a snailfish number must be a pair ({line})")
    _validate(number, line)
    return number


def parse_input(text: str) -> List[list]:
    numbers = [parse_number(line) for line in text.strip().splitlines() if line.strip()]
    if not numbers:
        raise ValueError("no snailfish numbers in input")
    return numbers


def format_number(number: Number) -> str:
    if isinstance(number, int):
        return str(number)
    return f"[{format_number(number[0])},{format_number(number[1])}]"


def _add_leftmost(node: Number, value: int) -> Number:
    if isinstance(node, int):
        return node + value
    return [_add_leftmost(node[0], value), node[1]]


def _add_rightmost(node: Number, value: int) -> Number:
    if isinstance(node, int):
        return node + value
    return [node[0], _add_rightmost(node[1], value)]


def _explode(node: Number, depth: int) -> Tuple[bool, int, Number, int]:
    """
    Explode the leftmost pair nested `SNAILFISH_EXPLODE_DEPTH` deep.

    Returns (exploded, carry to the left, new node, carry to the right).
    """
    if isinstance(node, int):
        return False, 0, node, 0
    left, right = node
    if depth >= SNAILFISH_EXPLODE_DEPTH and isinstance(left, int) and isinstance(right, int):
        return True, left, 0, right

    changed, carry_left, new_left, carry_right = _explode(left, depth + 1)
    if changed:
        return True, carry_left, [new_left, _add_leftmost(right, carry_right)], 0

    changed, carry_left, new_right, carry_right = _explode(right, depth + 1)
    if changed:
        return True, 0, [_add_rightmost(left, carry_left), new_right], carry_right

    return False, 0, node, 0


def _split(node: Number) -> Tuple[bool, Number]:
    if isinstance(node, int):
        if node >= SNAILFISH_SPLIT_THRESHOLD:
            return True, [node // 2, node - node // 2]
        return False, node

    changed, new_left = _split(node[0])
    if changed:
        return True, [new_left, node[1]]
    changed, new_right = _split(node[1])
    if changed:
        return True, [node[0], new_right]
    return False, node


def reduce_once(number: list) -> Tuple[bool, list]:
    """
    Apply a single explode or split. Returns (changed, number).
    """
    changed, _, exploded, _ = _explode(number, 0)
    if changed:
        return True, exploded
    return _split(number)


def reduce_number(number: list) -> list:
    changed = True
    while changed:
        changed, number = reduce_once(number)
    return number


def add(a: list, b: list) -> list:
    return reduce_number([a, b])


def magnitude(number: Number) -> int:
    if isinstance(number, int):
        return number
    return 3 * magnitude(number[0]) + 2 * magnitude(number[1])


def challenge_one(numbers: Sequence[list]) -> int:
    return magnitude(reduce(add, numbers))


def challenge_two(numbers: Sequence[list]) -> int:
    if len(numbers) < 2:
        raise ValueError("need at least two snailfish numbers to add a pair")
    return max(magnitude(add(a, b)) for a, b in permutations(numbers, 2))


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
