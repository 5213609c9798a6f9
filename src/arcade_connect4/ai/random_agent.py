from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import random

from arcade_connect4.game.state import GameState
from arcade_connect4.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)

    def choose_move(self, state: GameState) -> Optional[Move]:
        moves = state.board.valid_moves()
        if not moves:
            return None
        return self.rng.choice(moves)
