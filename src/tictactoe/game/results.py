from __future__ import annotations
from typing import Optional

from tictactoe.core.rules import Result
from tictactoe.game.state import Player

DRAW_MESSAGE = "It's a draw!"


def result_message(result: Result, human: Player, computer: Player) -> Optional[str]:
    """End-of-game notification text, or None while the game is still going."""
    if result.draw:
        return DRAW_MESSAGE
    if result.winner is None:
        return None
    for p in (human, computer):
        if p.mark == result.winner:
            return f"{p.name} wins!"
    return f"Player {result.winner} wins!"
