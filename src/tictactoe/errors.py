from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for errors raised by the game core."""


class InvalidIndexError(TicTacToeError, ValueError):
    def __init__(self, index: object) -> None:
        super().__init__(f"Cell index {index!r} is not an integer in 0-8.")
        self.index = index


class PreconditionError(TicTacToeError, RuntimeError):
    """
    Raised when the core reaches a state its own invariants should make
    unreachable (engine asked to move on a full board, unknown current player).
    """
