# src/arcade_connect4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from arcade_connect4.config import ROWS, COLS
from arcade_connect4.errors import IllegalMoveError
from arcade_connect4.types import Cell, Side, Move

_SYMBOLS: Dict[str, Cell] = {".": None, "H": "H", "C": "C"}


@dataclass(slots=True)
class Board:
    """
    Row 0 is the top of the board, row ``rows - 1`` the bottom.
    Discs fall to the highest free row index in a column.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from strings of '.', 'H' and 'C', top row first.
        Spaces are ignored, so "H C . ." and "HC.." are the same row.
        """
        lines = [r.replace(" ", "") for r in rows]
        if not lines:
            raise ValueError("Board needs at least one row.")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("All rows must have the same width.")

        grid: List[List[Cell]] = []
        for line in lines:
            row: List[Cell] = []
            for ch in line:
                if ch not in _SYMBOLS:
                    raise ValueError(f"Unknown cell symbol: {ch!r}")
                row.append(_SYMBOLS[ch])
            grid.append(row)

        # No floating discs: anything above an empty cell must be empty too
        for c in range(width):
            for r in range(len(grid) - 1):
                if grid[r][c] is not None and grid[r + 1][c] is None:
                    raise ValueError(f"Floating disc in column {c} at row {r}.")

        return cls(rows=len(grid), cols=width, grid=grid)

    def to_rows(self) -> List[str]:
        return ["".join(p if p is not None else "." for p in row) for row in self.grid]

    def copy(self) -> "Board":
        b = Board(self.rows, self.cols)
        b.grid = [row[:] for row in self.grid]
        return b

    def swapped(self) -> "Board":
        """Copy with every human disc turned into a computer disc and back."""
        flip: Dict[Cell, Cell] = {None: None, "H": "C", "C": "H"}
        b = Board(self.rows, self.cols)
        b.grid = [[flip[p] for p in row] for row in self.grid]
        return b

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def disc_count(self) -> int:
        return sum(1 for row in self.grid for p in row if p is not None)

    def drop_row(self, col: int) -> Optional[int]:
        """Lowest empty row in ``col``, or None when the column is full or off the board."""
        if col < 0 or col >= self.cols:
            return None
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def drop(self, col: Move, side: Side) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise IllegalMoveError(c, "Column out of range.")

        r = self.drop_row(c)
        if r is None:
            raise IllegalMoveError(c)
        self.grid[r][c] = side
        return r


def legal_columns(board: Board) -> List[Move]:
    """Playable columns, left to right. Shuffle before use if order matters."""
    return board.valid_moves()


def drop_row(board: Board, col: int) -> Optional[int]:
    return board.drop_row(col)


def apply_move(board: Board, col: Move, side: Side) -> Board:
    """Return a new board with ``side``'s disc dropped into ``col``."""
    nb = board.copy()
    nb.drop(col, side)
    return nb


def is_full(board: Board) -> bool:
    return board.is_full()
