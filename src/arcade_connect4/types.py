# src/arcade_connect4/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Side = Literal["H", "C"]
Cell = Optional[Side]
Move = NewType("Move", int)   # column index 0..6

HUMAN: Side = "H"
COMPUTER: Side = "C"


def other(side: Side) -> Side:
    return COMPUTER if side == HUMAN else HUMAN
