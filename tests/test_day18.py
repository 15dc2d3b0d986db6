"""
Tests for day 18 (Snailfish).

The reduction examples are the ones worked through in the puzzle text.
"""

from __future__ import annotations

from functools import reduce

import pytest

from aoc2021.days.day18 import (
    add,
    challenge_one,
    challenge_two,
    format_number,
    magnitude,
    parse_input,
    parse_number,
    reduce_number,
    reduce_once,
)


HOMEWORK = """\
[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]
[[[5,[2,8]],4],[5,[[9,9],0]]]
[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]
[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]
[[[7,[6,4]],[3,[1,3]]],[[[5,5],1],9]]
[[6,[[7,3],[3,2]]],[[[3,8],[5,7]],4]]
[[[[5,4],[7,7]],8],[[8,3],8]]
[[9,3],[[9,9],[6,[4,9]]]]
[[2,[[7,7],7]],[[5,8],[[9,3],[0,2]]]]
[[[[5,2],5],[8,[3,7]]],[[5,[7,5]],[4,4]]]
"""


def _n(text):
    return parse_number(text)


def test_parse_and_format_round_trip():
    text = "[[1,9],[8,5]]"
    assert format_number(parse_number(text)) == text


@pytest.mark.parametrize("text", ["[1,2", "[1,2,3]", "5", "[1,[2]]", "[-1,2]", "[1,true]"])
def test_parse_number_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_number(text)


@pytest.mark.parametrize(
    "before, after",
    [
        ("[[[[[9,8],1],2],3],4]", "[[[[0,9],2],3],4]"),
        ("[7,[6,[5,[4,[3,2]]]]]", "[7,[6,[5,[7,0]]]]"),
        ("[[6,[5,[4,[3,2]]]],1]", "[[6,[5,[7,0]]],3]"),
        ("[[3,[2,[1,[7,3]]]],[6,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]"),
        ("[[3,[2,[8,0]]],[9,[5,[4,[3,2]]]]]", "[[3,[2,[8,0]]],[9,[5,[7,0]]]]"),
    ],
)
def test_single_explode(before, after):
    changed, number = reduce_once(_n(before))
    assert changed
    assert format_number(number) == after


@pytest.mark.parametrize(
    "before, after",
    [
        ("[[[[0,7],4],[15,[0,13]]],[1,1]]", "[[[[0,7],4],[[7,8],[0,13]]],[1,1]]"),
        ("[[[[0,7],4],[[7,8],[0,13]]],[1,1]]", "[[[[0,7],4],[[7,8],[0,[6,7]]]],[1,1]]"),
    ],
)
def test_single_split(before, after):
    changed, number = reduce_once(_n(before))
    assert changed
    assert format_number(number) == after


def test_reduced_number_is_left_alone():
    changed, number = reduce_once(_n("[[1,2],3]"))
    assert not changed
    assert number == [[1, 2], 3]


def test_add_reduces():
    total = add(_n("[[[[4,3],4],4],[7,[[8,4],9]]]"), _n("[1,1]"))
    assert format_number(total) == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"


def test_add_does_not_modify_operands():
    a = _n("[[[[4,3],4],4],[7,[[8,4],9]]]")
    add(a, _n("[1,1]"))
    assert format_number(a) == "[[[[4,3],4],4],[7,[[8,4],9]]]"


@pytest.mark.parametrize(
    "count, expected",
    [
        (4, "[[[[1,1],[2,2]],[3,3]],[4,4]]"),
        (5, "[[[[3,0],[5,3]],[4,4]],[5,5]]"),
        (6, "[[[[5,0],[7,4]],[5,5]],[6,6]]"),
    ],
)
def test_sum_of_lists(count, expected):
    numbers = [[i, i] for i in range(1, count + 1)]
    assert format_number(reduce(add, numbers)) == expected


def test_reduce_number_on_larger_example():
    numbers = parse_input(
        "[[[0,[4,5]],[0,0]],[[[4,5],[2,6]],[9,5]]]\n"
        "[7,[[[3,7],[4,3]],[[6,3],[8,8]]]]\n"
    )
    total = reduce_number([numbers[0], numbers[1]])
    assert format_number(total) == "[[[[4,0],[5,4]],[[7,7],[6,0]]],[[8,[7,7]],[[7,9],[5,0]]]]"


@pytest.mark.parametrize(
    "text, value",
    [
        ("[[1,2],[[3,4],5]]", 143),
        ("[[[[0,7],4],[[7,8],[6,0]]],[8,1]]", 1384),
        ("[[[[1,1],[2,2]],[3,3]],[4,4]]", 445),
        ("[[[[3,0],[5,3]],[4,4]],[5,5]]", 791),
        ("[[[[5,0],[7,4]],[5,5]],[6,6]]", 1137),
        ("[[[[8,7],[7,7]],[[8,6],[7,7]]],[[[0,7],[6,6]],[8,7]]]", 3488),
    ],
)
def test_magnitude(text, value):
    assert magnitude(_n(text)) == value


def test_homework_total():
    numbers = parse_input(HOMEWORK)
    total = reduce(add, numbers)
    assert format_number(total) == "[[[[6,6],[7,6]],[[7,7],[7,0]]],[[[7,7],[7,7]],[[7,8],[9,9]]]]"


def test_challenges_on_example():
    numbers = parse_input(HOMEWORK)
    assert challenge_one(numbers) == 4140
    assert challenge_two(numbers) == 3993


def test_challenge_two_needs_two_numbers():
    with pytest.raises(ValueError):
        challenge_two(parse_input("[1,2]\n"))
