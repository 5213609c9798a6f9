from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Entrant:
    name: str
    make: Callable[[int], object]  # seed -> fresh agent
    depth: int = 0  # search plies, 0 for agents that do not search


@dataclass
class Agg:
    depth: int = 0
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0
