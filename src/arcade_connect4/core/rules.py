from __future__ import annotations
from functools import lru_cache
from typing import List, Optional, Tuple

from arcade_connect4.config import CONNECT_N
from arcade_connect4.core.board import Board
from arcade_connect4.types import COMPUTER, HUMAN, Side

Coord = Tuple[int, int]  # (row, col)


@lru_cache(maxsize=None)
def windows(rows: int, cols: int, n: int = CONNECT_N) -> Tuple[Tuple[Coord, ...], ...]:
    """
    Every run of ``n`` consecutive cells on a rows x cols grid, in the
    four line directions: horizontal, vertical, down-right, up-right.
    """
    out: List[Tuple[Coord, ...]] = []

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            out.append(tuple((r, c + i) for i in range(n)))

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            out.append(tuple((r + i, c) for i in range(n)))

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            out.append(tuple((r + i, c + i) for i in range(n)))

    # Diagonal up-right
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            out.append(tuple((r - i, c + i) for i in range(n)))

    return tuple(out)


def winning_line(board: Board, side: Side) -> Optional[List[Coord]]:
    g = board.grid
    for coords in windows(board.rows, board.cols):
        if all(g[r][c] == side for (r, c) in coords):
            return list(coords)
    return None


def has_connect_four(board: Board, side: Side) -> bool:
    return winning_line(board, side) is not None


def check_winner(board: Board) -> Optional[Side]:
    if has_connect_four(board, COMPUTER):
        return COMPUTER
    if has_connect_four(board, HUMAN):
        return HUMAN
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None


def is_terminal(board: Board) -> bool:
    return check_winner(board) is not None or board.is_full()
