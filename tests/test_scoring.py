from __future__ import annotations

from arcade_connect4.core.board import Board
from arcade_connect4.core.scoring import evaluate, score_window
from arcade_connect4.types import COMPUTER, HUMAN


def test_empty_board_scores_zero_for_both_sides():
    b = Board()
    assert evaluate(b, HUMAN) == evaluate(b, COMPUTER) == 0


def test_center_bonus_counts_own_discs_only():
    b = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "...C...",
    ])
    assert evaluate(b, COMPUTER) == 30
    assert evaluate(b, HUMAN) == 0


class TestScoreWindow:
    def test_three_and_two(self):
        assert score_window(["C", "C", "C", None], COMPUTER) == 120
        assert score_window(["C", None, "C", None], COMPUTER) == 12

    def test_opponent_penalties_are_larger(self):
        assert score_window(["C", "C", "C", None], HUMAN) == -140
        assert score_window([None, "C", None, "C"], HUMAN) == -16

    def test_mixed_and_sparse_windows_score_nothing(self):
        assert score_window(["C", "C", "H", None], COMPUTER) == 0
        assert score_window(["C", "C", "H", None], HUMAN) == 0
        assert score_window(["C", None, None, None], COMPUTER) == 0
        assert score_window([None, None, None, None], HUMAN) == 0

    def test_complete_four(self):
        assert score_window(["C"] * 4, COMPUTER) == 10_000
        assert score_window(["C"] * 4, HUMAN) == 0


def test_bottom_row_three():
    b = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "CCC....",
    ])
    # cols 0-3 window: +120, cols 1-4 window: +12
    assert evaluate(b, COMPUTER) == 132
    assert evaluate(b, HUMAN) == -156
