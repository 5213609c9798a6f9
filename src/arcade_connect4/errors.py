from __future__ import annotations


class IllegalMoveError(ValueError):
    """Raised when a disc is dropped into a full or out-of-range column."""

    def __init__(self, column: int, reason: str = "Column is full.") -> None:
        super().__init__(reason)
        self.column = column


class GameOverError(ValueError):
    """Raised when a move is submitted after the game has ended."""
