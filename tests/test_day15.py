"""
Tests for day 15 (Chiton).
"""

from __future__ import annotations

import numpy as np
import pytest

from aoc2021.days.day15 import (
    challenge_one,
    challenge_two,
    lowest_total_risk,
    parse_input,
    tile_map,
)


EXAMPLE = """\
1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581
"""


@pytest.fixture
def risk():
    return parse_input(EXAMPLE)


def test_tile_map_shape_and_wrapping(risk):
    tiled = tile_map(risk)
    assert tiled.shape == (50, 50)
    assert tiled[0, 10] == 2
    assert tiled[10, 10] == 3
    assert np.array_equal(tiled[:10, :10], risk)


def test_tile_map_wraps_nine_back_to_one():
    assert tile_map(np.array([[8]])).tolist()[0] == [8, 9, 1, 2, 3]


def test_start_cell_risk_is_not_counted():
    assert lowest_total_risk(parse_input("91\n11\n")) == 2
    assert lowest_total_risk(parse_input("9\n")) == 0


def test_path_may_move_up_and_left():
    grid = parse_input(
        "19999\n"
        "19111\n"
        "19191\n"
        "11191\n"
        "99991\n"
    )
    assert lowest_total_risk(grid) == 12


def test_challenges_on_example(risk):
    assert challenge_one(risk) == 40
    assert challenge_two(risk) == 315
