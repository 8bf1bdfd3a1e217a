from __future__ import annotations
from typing import Literal, Tuple, Union

from tictactoe.config import CELL_COUNT
from tictactoe.types import Move

Command = Union[Tuple[Literal["move"], Move], Tuple[Literal["reset"], None], Tuple[Literal["quit"], None]]

PROMPT = f"Cell (1-{CELL_COUNT}), r to reset, q to quit: "


def parse_command(raw: str) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return ("quit", None)
    if s in {"r", "reset"}:
        return ("reset", None)
    if not s.isdigit():
        raise ValueError(f"Invalid input. Enter 1-{CELL_COUNT}, r or q.")
    idx = int(s) - 1
    if idx < 0 or idx >= CELL_COUNT:
        raise ValueError(f"Cell must be between 1 and {CELL_COUNT}.")
    return ("move", Move(idx))
