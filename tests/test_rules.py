"""Tests for terminal-state detection."""

from itertools import product

import pytest

from tictactoe.core.board import Board
from tictactoe.core.rules import (
    DRAW, IN_PROGRESS, WINNING_LINES, Result,
    check_result, check_winner, check_winner_with_line, is_draw,
)

_ = None


def board_of(*cells):
    return Board.from_cells(cells)


class TestCheckResult:
    def test_empty_board_in_progress(self):
        res = check_result(Board())
        assert res == IN_PROGRESS
        assert res.in_progress and not res.is_terminal

    def test_completed_column(self):
        b = board_of(
            "X", "O", _,
            "X", "O", _,
            "X", _, _,
        )
        assert check_result(b) == Result.win("X")
        assert check_winner_with_line(b) == ("X", (0, 3, 6))

    def test_diagonal_needs_last_cell(self):
        b = board_of(
            "X", "O", _,
            "O", "X", _,
            _, _, _,
        )
        assert check_result(b).in_progress
        b.place_marker(8, "X")
        assert check_winner_with_line(b) == ("X", (0, 4, 8))

    def test_anti_diagonal(self):
        b = board_of(
            "X", "X", "O",
            _, "O", _,
            "O", "X", _,
        )
        assert check_winner(b) == "O"

    def test_full_board_without_line_is_draw(self):
        b = board_of(
            "X", "O", "X",
            "X", "O", "O",
            "O", "X", "X",
        )
        assert check_result(b) == DRAW
        assert is_draw(b)

    def test_win_on_full_board_is_not_draw(self):
        b = board_of(
            "X", "X", "X",
            "O", "O", "X",
            "X", "O", "O",
        )
        res = check_result(b)
        assert res.winner == "X"
        assert not res.draw

    def test_first_listed_line_wins_on_unreachable_board(self):
        b = board_of(
            "O", "O", "O",
            "X", "X", "X",
            _, _, _,
        )
        assert check_winner_with_line(b) == ("O", (0, 1, 2))

    def test_does_not_mutate(self):
        b = board_of("X", _, "O", _, _, _, _, _, _)
        before = b.cells()
        check_result(b)
        assert b.cells() == before


class TestAllBoards:
    @pytest.fixture(scope="class")
    def boards(self):
        return [list(cells) for cells in product((None, "X", "O"), repeat=9)]

    def test_matches_definition_on_every_board(self, boards):
        for cells in boards:
            res = check_result(Board.from_cells(cells))
            winners = {
                cells[a] for (a, b, c) in WINNING_LINES
                if cells[a] is not None and cells[a] == cells[b] == cells[c]
            }
            if winners:
                assert res.winner in winners
                assert not res.draw
            elif None not in cells:
                assert res == DRAW
            else:
                assert res == IN_PROGRESS
