from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.types import Cell, Mark

Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


@dataclass(frozen=True, slots=True)
class Result:
    """
    Outcome of a position. Exactly one of:
      in progress  (winner None, draw False)
      win          (winner set)
      draw         (draw True)
    """
    winner: Cell = None
    draw: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.winner is not None or self.draw

    @property
    def in_progress(self) -> bool:
        return not self.is_terminal

    @staticmethod
    def win(mark: Mark) -> "Result":
        return Result(winner=mark)


IN_PROGRESS = Result()
DRAW = Result(draw=True)


def check_winner_with_line(board: Board) -> Optional[Tuple[Mark, Line]]:
    g = board.grid
    for line in WINNING_LINES:
        a, b, c = line
        p = g[a]
        if p and p == g[b] == g[c]:
            return p, line
    return None


def check_winner(board: Board) -> Optional[Mark]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def check_result(board: Board) -> Result:
    w = check_winner(board)
    if w is not None:
        return Result.win(w)
    if board.is_full():
        return DRAW
    return IN_PROGRESS


def is_draw(board: Board) -> bool:
    return check_result(board).draw
