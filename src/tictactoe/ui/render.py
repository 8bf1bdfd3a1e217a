from __future__ import annotations
from typing import Iterable, List, Optional, Sequence, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner_with_line
from tictactoe.types import Cell
from tictactoe.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE, RESET


def _piece(cell: Cell, index: int) -> str:
    if cell is None:
        # show the key to press for an empty cell
        return c(str(index + 1), FG_GRAY)
    if cell == "X":
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def winning_line(cells: Sequence[Cell]) -> Set[int]:
    res = check_winner_with_line(Board.from_cells(cells))
    return set(res[1]) if res else set()


def format_board(cells: Sequence[Cell], highlight: Optional[Iterable[int]] = None) -> str:
    hl: Set[int] = set(highlight) if highlight else set()
    size = config.BOARD_SIZE

    lines: List[str] = []
    for r in range(size):
        parts = []
        for col in range(size):
            i = r * size + col
            p = _piece(cells[i], i)
            if i in hl and config.USE_COLOR:
                p = f"{REVERSE}{p}{RESET}"
            parts.append(f" {p} ")
        lines.append("|".join(parts))
        if r < size - 1:
            lines.append(c("---+---+---", DIM))
    return "\n".join(lines)


def render(cells: Sequence[Cell], message: Optional[str] = None, status: str = "") -> None:
    clear_screen()

    print(c("TIC-TAC-TOE", BOLD))
    if message:
        print(c(message, FG_CYAN))
    elif status:
        print(c(status, FG_CYAN))
    else:
        print()

    print(format_board(cells, winning_line(cells)))
    print()
