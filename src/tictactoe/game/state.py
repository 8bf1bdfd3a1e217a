from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from tictactoe.config import COMPUTER_MARK, COMPUTER_NAME, HUMAN_MARK, HUMAN_NAME
from tictactoe.core.board import Board
from tictactoe.types import Mark


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    mark: Mark


def default_players() -> tuple[Player, Player]:
    return Player(HUMAN_NAME, HUMAN_MARK), Player(COMPUTER_NAME, COMPUTER_MARK)


@dataclass(slots=True)
class GameSession:
    """Single source of truth for one game in progress. Mutated only by the controller."""
    current: Player
    board: Board = field(default_factory=Board)
    terminal: bool = False
    last_status: Optional[str] = None
