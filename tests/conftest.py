from __future__ import annotations

import random

import matplotlib
import pytest

from arcade_connect4.core.board import Board

matplotlib.use("Agg")


# Full board with no four-in-a-row anywhere
DRAW_ROWS = [
    "HCHCHCH",
    "HCHCHCH",
    "CHCHCHC",
    "CHCHCHC",
    "HCHCHCH",
    "HCHCHCH",
]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(2024)


@pytest.fixture
def draw_board() -> Board:
    return Board.from_rows(DRAW_ROWS)


@pytest.fixture
def almost_draw_board() -> Board:
    rows = list(DRAW_ROWS)
    rows[0] = rows[0][:-1] + "."
    return Board.from_rows(rows)
