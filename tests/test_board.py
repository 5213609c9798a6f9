from __future__ import annotations

import pytest

from arcade_connect4.core.board import Board, apply_move, drop_row, is_full, legal_columns
from arcade_connect4.errors import IllegalMoveError
from arcade_connect4.types import COMPUTER, HUMAN


class TestEmptyBoard:
    def test_shape_and_moves(self):
        b = Board()
        assert (b.rows, b.cols) == (6, 7)
        assert legal_columns(b) == [0, 1, 2, 3, 4, 5, 6]
        assert not is_full(b)
        assert b.disc_count() == 0

    def test_drop_row_is_bottom(self):
        b = Board()
        for c in range(b.cols):
            assert drop_row(b, c) == 5


class TestMoves:
    def test_apply_move_returns_new_board(self):
        b = Board()
        nb = apply_move(b, 3, HUMAN)

        assert nb.grid[5][3] == HUMAN
        assert b.grid[5][3] is None
        assert b.disc_count() == 0

    def test_discs_stack_in_a_column(self):
        b = Board()
        assert b.drop(2, HUMAN) == 5
        assert b.drop(2, COMPUTER) == 4
        assert drop_row(b, 2) == 3
        assert b.to_rows()[-2:] == ["..C....", "..H...."]

    def test_full_column_is_not_legal(self):
        b = Board.from_rows([
            "H......",
            "C......",
            "H......",
            "C......",
            "H......",
            "C......",
        ])
        assert 0 not in legal_columns(b)
        assert drop_row(b, 0) is None

        with pytest.raises(IllegalMoveError):
            apply_move(b, 0, COMPUTER)

    def test_illegal_move_is_a_value_error(self):
        b = Board()
        with pytest.raises(ValueError, match="out of range"):
            b.drop(7, HUMAN)
        with pytest.raises(IllegalMoveError) as exc:
            b.drop(-1, HUMAN)
        assert exc.value.column == -1

    def test_full_board(self, draw_board):
        assert is_full(draw_board)
        assert legal_columns(draw_board) == []
        assert draw_board.disc_count() == 42


class TestFromRows:
    def test_parses_symbols_top_row_first(self):
        b = Board.from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            "...C...",
            "H..H...",
        ])
        assert b.grid[5][0] == HUMAN
        assert b.grid[5][3] == HUMAN
        assert b.grid[4][3] == COMPUTER
        assert b.disc_count() == 3

    def test_spaces_are_ignored(self):
        b = Board.from_rows(["H C", "H C"])
        assert (b.rows, b.cols) == (2, 2)

    def test_rejects_floating_disc(self):
        with pytest.raises(ValueError, match="Floating"):
            Board.from_rows([
                ".......",
                ".......",
                ".......",
                "...H...",
                ".......",
                ".......",
            ])

    def test_rejects_unknown_symbol_and_ragged_rows(self):
        with pytest.raises(ValueError):
            Board.from_rows(["X......"])
        with pytest.raises(ValueError):
            Board.from_rows(["......", "......."])

    def test_swapped_flips_every_disc(self):
        b = Board.from_rows(["..", "HC"])
        assert b.swapped().to_rows() == ["..", "CH"]
        assert b.to_rows() == ["..", "HC"]


class TestDropRowBounds:
    def test_off_board_columns_have_no_row(self):
        b = Board.from_rows([
            ".......",
            ".......",
            ".......",
            ".......",
            ".......",
            "......H",
        ])
        assert drop_row(b, -1) is None
        assert drop_row(b, 7) is None
        assert drop_row(b, 6) == 4
