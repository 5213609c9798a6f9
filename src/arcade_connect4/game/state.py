from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from arcade_connect4.core.board import Board
from arcade_connect4.types import HUMAN, Side

Coord = Tuple[int, int]

YOUR_TURN = "Your turn! Drop a disc."
HUMAN_WINS = "You connected four! Victory!"
COMPUTER_WINS = "Arcade AI lines up four. Better luck next time!"
DRAW = "Stalemate! It's a draw."


class Outcome(str, Enum):
    IN_PROGRESS = "in_progress"
    HUMAN_WON = "human_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"


@dataclass(slots=True)
class GameState:
    board: Board
    current: Side = HUMAN
    last_status: str = YOUR_TURN
    outcome: Outcome = Outcome.IN_PROGRESS
    winning_line: Optional[List[Coord]] = None

    @property
    def finished(self) -> bool:
        return self.outcome is not Outcome.IN_PROGRESS
