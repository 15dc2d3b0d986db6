"""
Day 4: Giant Squid

Bingo against a giant squid. The input starts with the comma separated
draw order, followed by 5x5 boards separated by blank lines.

Boards are kept as one (n_boards, 5, 5) integer array plus a boolean array
of the same shape holding the marked cells, so a draw marks every board at
once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..utils.cli import run_day

DAY = 4

BOARD_SIZE = 5


@dataclass
class BingoGame:
    """
    Draw order plus the boards being played.

    `marked` starts all False; use `copy()` before playing so the parsed
    input can be reused by both challenges.
    """

    numbers: List[int]
    boards: np.ndarray
    marked: np.ndarray = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.marked is None:
            self.marked = np.zeros(self.boards.shape, dtype=bool)

    def copy(self) -> "BingoGame":
        return BingoGame(list(self.numbers), self.boards.copy(), self.marked.copy())

    def mark(self, number: int) -> None:
        self.marked |= self.boards == number

    def winners(self) -> np.ndarray:
        """
        Boolean mask of the boards with a fully marked row or column.
        """
        rows = self.marked.all(axis=2).any(axis=1)
        cols = self.marked.all(axis=1).any(axis=1)
        return rows | cols

    def score(self, board: int) -> int:
        """
        Sum of the unmarked numbers on `board`.
        """
        return int(self.boards[board][~self.marked[board]].sum())


def _parse_board(block: str) -> List[List[int]]:
    rows = [line.split() for line in block.strip().splitlines()]
    if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
        raise ValueError(f"expected a {BOARD_SIZE}x{BOARD_SIZE} board, got:\n{block}")
    return [[int(v) for v in row] for row in rows]


def parse_input(text: str) -> BingoGame:
    blocks = text.strip().split("\n\n")
    if len(blocks) < 2:
        raise ValueError("input must contain the draw order and at least one board")

    numbers = [int(v) for v in blocks[0].strip().split(",")]
    boards = np.array([_parse_board(b) for b in blocks[1:]], dtype=np.int64)
    return BingoGame(numbers=numbers, boards=boards)


def challenge_one(game: BingoGame) -> int:
    game = game.copy()
    for number in game.numbers:
        game.mark(number)
        winners = np.flatnonzero(game.winners())
        if len(winners):
            return game.score(int(winners[0])) * number

    raise RuntimeError("No winning score found")


def challenge_two(game: BingoGame) -> int:
    game = game.copy()
    playing = np.ones(len(game.boards), dtype=bool)
    for number in game.numbers:
        game.mark(number)
        new_winners = np.flatnonzero(game.winners() & playing)
        playing[new_winners] = False
        if len(new_winners) and not playing.any():
            return game.score(int(new_winners[-1])) * number

    raise RuntimeError("No winning score found")


def main(argv: Optional[List[str]] = None) -> None:
    run_day(DAY, parse_input, challenge_one, challenge_two, argv)


if __name__ == "__main__":
    main()
