from __future__ import annotations
from typing import Optional, Protocol

from arcade_connect4.game.state import GameState
from arcade_connect4.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Optional[Move]:
        ...
