from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
import logging
import time
from typing import Optional

from tictactoe.config import COMPUTER_MARK, SCORE_DRAW, SCORE_LOSS, SCORE_WIN
from tictactoe.core.board import Board
from tictactoe.core.rules import check_result
from tictactoe.errors import PreconditionError
from tictactoe.game.state import GameSession
from tictactoe.types import Mark, Move

logger = logging.getLogger(__name__)


def other(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


@dataclass(slots=True)
class MinimaxAgent:
    """
    Perfect player: exhaustive minimax over the full game tree.

    No pruning, no transposition table and no depth discount, so every
    win scores the same regardless of how soon it happens. The board is
    searched in place; each hypothetical placement is cleared again before
    the next sibling is tried.
    """
    mark: Mark = COMPUTER_MARK
    name: str = "Minimax AI"

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0

    def choose_move(self, state: GameSession) -> Move:
        move = self.get_best_move(state.board, self.mark)
        if move is None:
            raise PreconditionError("No empty cell left for the computer to play.")
        return move

    def get_best_move(self, board: Board, mark: Optional[Mark] = None) -> Optional[Move]:
        """
        Index of an optimal move for `mark`, or None if the board is full.
        Ties keep the lowest index.
        """
        me: Mark = mark or self.mark
        start = time.perf_counter()
        self._nodes = 0

        best_move: Optional[Move] = None
        best_score = -inf

        for m in board.empty_indices():
            board.place_marker(m, me)
            score = self.minimax(board, False, me)
            board.clear(m)

            if score > best_score:
                best_score = score
                best_move = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move": best_move,
            "score": None if best_move is None else int(best_score),
            "nodes": self._nodes,
            "time_ms": int(elapsed * 1000),
        }
        logger.debug("%s (%s) search: %s", self.name, me, self.last_info)

        return best_move

    def minimax(self, board: Board, is_automated_turn: bool, mark: Optional[Mark] = None) -> int:
        """
        Value of `board` for the automated side (`mark`), +1 win / 0 draw / -1 loss,
        assuming both sides play perfectly from here.
        """
        me: Mark = mark or self.mark
        opp = other(me)
        self._nodes += 1

        result = check_result(board)
        if result.is_terminal:
            if result.winner == me:
                return SCORE_WIN
            if result.winner == opp:
                return SCORE_LOSS
            return SCORE_DRAW

        if is_automated_turn:
            best = -inf
            for m in board.empty_indices():
                board.place_marker(m, me)
                best = max(best, self.minimax(board, False, me))
                board.clear(m)
        else:
            best = inf
            for m in board.empty_indices():
                board.place_marker(m, opp)
                best = min(best, self.minimax(board, True, me))
                board.clear(m)

        return int(best)
