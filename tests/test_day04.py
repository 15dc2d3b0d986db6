"""
Tests for day 4 (Giant Squid).
"""

from __future__ import annotations

import numpy as np
import pytest

from aoc2021.days.day04 import BingoGame, challenge_one, challenge_two, parse_input


EXAMPLE = """\
7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7
"""


@pytest.fixture
def game():
    return parse_input(EXAMPLE)


def test_parse_input(game):
    assert game.numbers[:3] == [7, 4, 9]
    assert game.boards.shape == (3, 5, 5)
    assert not game.marked.any()


def test_parse_input_rejects_bad_board():
    with pytest.raises(ValueError):
        parse_input("1,2\n\n1 2 3\n4 5 6\n")


def test_column_wins():
    boards = np.arange(25).reshape(1, 5, 5)
    game = BingoGame(numbers=[1, 6, 11, 16, 21], boards=boards)
    for number in game.numbers[:-1]:
        game.mark(number)
        assert not game.winners().any()
    game.mark(21)
    assert game.winners().tolist() == [True]
    assert game.score(0) == sum(range(25)) - (1 + 6 + 11 + 16 + 21)


def test_challenges_do_not_mutate_parsed_game(game):
    challenge_one(game)
    challenge_two(game)
    assert not game.marked.any()


def test_challenges_on_example(game):
    assert challenge_one(game) == 4512
    assert challenge_two(game) == 1924


def test_no_winner_raises():
    # Only two numbers are drawn, not enough to complete any line.
    game = parse_input("7,4\n" + EXAMPLE.split("\n", 1)[1])
    with pytest.raises(RuntimeError, match="No winning score found"):
        challenge_one(game)
