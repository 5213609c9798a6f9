from __future__ import annotations
from typing import Iterable, List, Optional, Set, Tuple

from arcade_connect4.config import CLEAR_SCREEN, USE_COLOR
from arcade_connect4.core.board import Board
from arcade_connect4.types import Cell, HUMAN

Coord = Tuple[int, int]

# ANSI SGR codes
_SGR = {"bold": 1, "dim": 2, "reverse": 7, "red": 31, "yellow": 33, "cyan": 36, "gray": 90}


def paint(text: str, *styles: str, color: bool = USE_COLOR) -> str:
    if not color or not styles:
        return text
    codes = ";".join(str(_SGR[s]) for s in styles)
    return f"\033[{codes}m{text}\033[0m"


def _disc(cell: Cell, winning: bool, color: bool) -> str:
    if cell is None:
        return paint("·", "gray", color=color)
    glyph, hue = ("H", "red") if cell == HUMAN else ("C", "yellow")
    if winning:
        # reverse video with color, lowercase letter without
        return paint(glyph, hue, "reverse", color=color) if color else glyph.lower()
    return paint(glyph, hue, color=color)


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None, color: bool = USE_COLOR) -> List[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [paint("   " + " ".join(str(i + 1) for i in range(board.cols)), "dim", color=color)]
    for r, row in enumerate(board.grid):
        discs = " ".join(_disc(cell, (r, c) in hl, color) for c, cell in enumerate(row))
        lines.append(f" | {discs} |")
    lines.append(paint("   " + "—" * (2 * board.cols - 1), "dim", color=color))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")

    print(paint("ARCADE CONNECT FOUR", "bold"))
    print(paint(status, "cyan") if status else "")
    print("\n".join(board_lines(board, highlight)))
    print(paint(f"   Drop a disc with 1-{board.cols}. q leaves the game.", "dim"))
