"""
Tests for day 17 (Trick Shot).
"""

from __future__ import annotations

import pytest

from aoc2021.days.day17 import (
    Target,
    challenge_one,
    challenge_two,
    hits,
    hitting_velocities,
    horizontal_position_at,
    parse_input,
    vertical_apogee,
    vertical_position_at,
)


EXAMPLE = "target area: x=20..30, y=-10..-5\n"


@pytest.fixture
def target():
    return parse_input(EXAMPLE)


def test_parse_input(target):
    assert target == Target(20, 30, -10, -5)


def test_target_on_the_left_is_hit_by_negative_shots():
    target = parse_input("target area: x=-30..-20, y=-10..-5")
    assert target == Target(-30, -20, -10, -5)
    assert hits(target, -7, 2)
    assert challenge_one(target) == 45
    assert challenge_two(target) == 112


def test_target_straddling_the_launch_column():
    target = parse_input("target area: x=-2..2, y=-3..-1")
    velocities = set(hitting_velocities(target))
    assert {(-1, -1), (-2, -1), (0, -1), (1, -1), (2, -1)} <= velocities
    assert {(-vx, vy) for vx, vy in velocities} == velocities


def test_parse_input_rejects_malformed_target():
    with pytest.raises(ValueError):
        parse_input("target: x=1..2")


@pytest.mark.parametrize(
    "vy, t, y",
    [(2, 1, 2), (2, 2, 3), (2, 3, 3), (2, 5, 0), (-1, 3, -6)],
)
def test_vertical_position_at(vy, t, y):
    assert vertical_position_at(vy, t) == y


@pytest.mark.parametrize(
    "vx, t, x",
    [(7, 1, 7), (7, 2, 13), (7, 7, 28), (7, 20, 28), (0, 5, 0), (-7, 2, -13), (-7, 20, -28)],
)
def test_horizontal_position_at(vx, t, x):
    assert horizontal_position_at(vx, t) == x


@pytest.mark.parametrize("vy, apogee", [(-3, 0), (0, 0), (3, 6), (9, 45)])
def test_vertical_apogee(vy, apogee):
    assert vertical_apogee(vy) == apogee


@pytest.mark.parametrize(
    "velocity, expected",
    [((7, 2), True), ((6, 3), True), ((9, 0), True), ((6, 9), True), ((17, -4), False)],
)
def test_hits(target, velocity, expected):
    assert hits(target, *velocity) is expected


def test_hitting_velocities_include_direct_shots(target):
    velocities = set(hitting_velocities(target))
    assert (30, -10) in velocities
    assert (20, -5) in velocities
    assert (6, 9) in velocities


def test_challenges_on_example(target):
    assert challenge_one(target) == 45
    assert challenge_two(target) == 112

