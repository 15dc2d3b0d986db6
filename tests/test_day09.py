"""
Tests for day 9 (Smoke Basin).
"""

from __future__ import annotations

import pytest

from aoc2021.days.day09 import (
    basin_size,
    challenge_one,
    challenge_two,
    low_points,
    parse_input,
)


EXAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""


@pytest.fixture
def heights():
    return parse_input(EXAMPLE)


def test_parse_input_rejects_ragged_rows():
    with pytest.raises(ValueError):
        parse_input("123\n12\n")


def test_low_points(heights):
    assert low_points(heights) == [(0, 1), (0, 9), (2, 2), (4, 6)]


def test_edges_count_as_higher():
    assert low_points(parse_input("19\n99\n")) == [(0, 0)]


@pytest.mark.parametrize(
    "low_point, size",
    [((0, 1), 3), ((0, 9), 9), ((2, 2), 14), ((4, 6), 9)],
)
def test_basin_sizes(heights, low_point, size):
    assert basin_size(heights, low_point) == size


def test_challenges_on_example(heights):
    assert challenge_one(heights) == 15
    assert challenge_two(heights) == 1134


def test_fewer_than_three_basins_raises():
    with pytest.raises(RuntimeError):
        challenge_two(parse_input("191\n"))
