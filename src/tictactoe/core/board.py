# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from tictactoe.config import CELL_COUNT
from tictactoe.errors import InvalidIndexError
from tictactoe.types import Cell, Mark, Move


@dataclass(slots=True)
class Board:
    grid: Optional[List[Cell]] = None

    def __post_init__(self) -> None:
        if self.grid is None:
            self.grid = [None] * CELL_COUNT
        elif len(self.grid) != CELL_COUNT:
            raise ValueError(f"Board needs exactly {CELL_COUNT} cells, got {len(self.grid)}.")

    @classmethod
    def from_cells(cls, cells: Iterable[Cell]) -> "Board":
        return cls(list(cells))

    def _check(self, index: int) -> int:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidIndexError(index)
        if index < 0 or index >= CELL_COUNT:
            raise InvalidIndexError(index)
        return index

    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of the 9 cells. Always a fresh tuple; mutating the board later does not touch it."""
        return tuple(self.grid)

    def cell(self, index: int) -> Cell:
        return self.grid[self._check(index)]

    def copy(self) -> "Board":
        return Board(self.grid[:])

    def empty_indices(self) -> List[Move]:
        return [Move(i) for i, v in enumerate(self.grid) if v is None]

    def is_full(self) -> bool:
        return all(v is not None for v in self.grid)

    def place_marker(self, index: int, mark: Mark) -> bool:
        i = self._check(index)
        if mark not in ("X", "O"):
            raise ValueError(f"Unknown mark {mark!r}.")
        if self.grid[i] is not None:
            return False
        self.grid[i] = mark
        return True

    def clear(self, index: int) -> None:
        """
        Empty a single cell.
        Used to retract a placement: hypothetical ones in the search, and a
        human move the controller has to roll back.
        """
        i = self._check(index)
        if self.grid[i] is None:
            raise ValueError(f"Cannot clear cell {i}: already empty.")
        self.grid[i] = None

    def reset(self) -> None:
        for i in range(CELL_COUNT):
            self.grid[i] = None
