from __future__ import annotations
from typing import Optional, Protocol

from tictactoe.core.board import Board
from tictactoe.game.state import GameSession
from tictactoe.types import Mark, Move


class Agent(Protocol):
    name: str
    mark: Mark

    def get_best_move(self, board: Board, mark: Optional[Mark] = None) -> Optional[Move]:
        ...

    def choose_move(self, state: GameSession) -> Move:
        ...
