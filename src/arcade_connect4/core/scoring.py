from __future__ import annotations
from typing import List

from arcade_connect4.config import (
    CENTER_WEIGHT,
    FOUR_OWN,
    THREE_OWN,
    THREE_OPP,
    TWO_OWN,
    TWO_OPP,
)
from arcade_connect4.core.board import Board
from arcade_connect4.core.rules import windows
from arcade_connect4.types import Cell, Side, other


def score_window(cells: List[Cell], side: Side) -> int:
    opp = other(side)

    s_count = cells.count(side)
    o_count = cells.count(opp)
    e_count = cells.count(None)

    score = 0

    if s_count == 4:
        score += FOUR_OWN
    elif s_count == 3 and e_count == 1:
        score += THREE_OWN
    elif s_count == 2 and e_count == 2:
        score += TWO_OWN

    # Opponent threats (penalize more)
    if o_count == 3 and e_count == 1:
        score -= THREE_OPP
    elif o_count == 2 and e_count == 2:
        score -= TWO_OPP

    return score


def evaluate(board: Board, side: Side) -> int:
    """
    Heuristic value of a position for ``side``; positive is good for ``side``.

    Only meaningful for non-terminal positions. The search checks for a
    finished game before it ever falls back to this.
    """
    score = 0

    # center column preference: only our own discs count
    center = board.cols // 2
    for r in range(board.rows):
        if board.grid[r][center] == side:
            score += CENTER_WEIGHT

    g = board.grid
    for coords in windows(board.rows, board.cols):
        score += score_window([g[r][c] for (r, c) in coords], side)

    return score
