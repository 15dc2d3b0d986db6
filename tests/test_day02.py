"""
Tests for day 2 (Dive!).
"""

from __future__ import annotations

import pytest

from aoc2021.days.day02 import Instruction, challenge_one, challenge_two, parse_input


EXAMPLE = """\
forward 5
down 5
forward 8
up 3
down 8
forward 2
"""


def test_instruction_from_line():
    assert Instruction.from_line("down 5") == Instruction("down", 5)


@pytest.mark.parametrize("line", ["backward 3", "forward", "up x", "down 1 2"])
def test_instruction_rejects_malformed_lines(line):
    with pytest.raises(ValueError, match="malformed instruction"):
        Instruction.from_line(line)


def test_challenge_one_on_example():
    assert challenge_one(parse_input(EXAMPLE)) == 150


def test_challenge_two_uses_aim():
    assert challenge_two(parse_input(EXAMPLE)) == 900


def test_up_and_down_alone_do_not_move_with_aim():
    instructions = parse_input("down 5\nup 2\n")
    assert challenge_two(instructions) == 0
