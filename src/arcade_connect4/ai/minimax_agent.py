from __future__ import annotations

from dataclasses import dataclass, field
from math import inf
from typing import Optional
import logging
import random
import time

from arcade_connect4.config import SEARCH_DEPTH, WIN_SCORE
from arcade_connect4.core.board import Board, apply_move, legal_columns
from arcade_connect4.core.rules import has_connect_four
from arcade_connect4.core.scoring import evaluate
from arcade_connect4.game.state import GameState
from arcade_connect4.types import COMPUTER, HUMAN, Move, Side

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    column: Optional[Move]
    score: float


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def terminal_score(depth: int, winner: Optional[Side]) -> float:
    """
    Score of a finished game seen with ``depth`` plies still to search.
    Wins found earlier (more depth left) score higher; losses found later
    score less negative.
    """
    if winner == COMPUTER:
        return WIN_SCORE + depth
    if winner == HUMAN:
        return -WIN_SCORE - depth
    return 0


def _shuffled(moves: list[Move], rng: random.Random) -> list[Move]:
    out = moves[:]
    rng.shuffle(out)
    return out


def search(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    rng: random.Random,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Depth-limited minimax with alpha-beta pruning. The computer maximizes.

    ``board`` is never modified; every child is searched on its own copy.
    Sibling order is a fresh shuffle at each node, so among equally scored
    moves the first one reached in that order wins.
    """
    if stats is not None:
        stats.nodes += 1

    moves = legal_columns(board)

    # Terminal check always comes before the static evaluation
    if has_connect_four(board, COMPUTER):
        return SearchResult(None, terminal_score(depth, COMPUTER))
    if has_connect_four(board, HUMAN):
        return SearchResult(None, terminal_score(depth, HUMAN))
    if not moves:
        return SearchResult(None, terminal_score(depth, None))

    if depth == 0:
        return SearchResult(None, evaluate(board, COMPUTER))

    # Fallback if nothing improves on the initial bound
    best_column: Move = rng.choice(moves)

    if maximizing:
        value = -inf
        for m in _shuffled(moves, rng):
            child = apply_move(board, m, COMPUTER)
            score = search(child, depth - 1, alpha, beta, False, rng, stats).score
            if score > value:
                value = score
                best_column = m
            alpha = max(alpha, value)
            if alpha >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return SearchResult(best_column, value)

    value = inf
    for m in _shuffled(moves, rng):
        child = apply_move(board, m, HUMAN)
        score = search(child, depth - 1, alpha, beta, True, rng, stats).score
        if score < value:
            value = score
            best_column = m
        beta = min(beta, value)
        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break
    return SearchResult(best_column, value)


def search_root(
    board: Board,
    depth: int = SEARCH_DEPTH,
    rng: random.Random | None = None,
    stats: SearchStats | None = None,
) -> SearchResult:
    """
    Run the search for the computer to move and guarantee a playable column.
    ``column`` is None only when the board has no legal move.
    """
    rng = rng if rng is not None else random.Random()

    moves = legal_columns(board)
    if not moves:
        return SearchResult(None, 0)

    result = search(board.copy(), depth, -inf, inf, True, rng, stats)
    if result.column is not None and result.column in moves:
        return result

    logger.warning("search returned unplayable column %r; picking a random legal column", result.column)
    return SearchResult(rng.choice(moves), result.score)


def choose_column(
    board: Board,
    depth: int = SEARCH_DEPTH,
    rng: random.Random | None = None,
    stats: SearchStats | None = None,
) -> Optional[Move]:
    """
    Pick the computer's column for ``board``.

    Returns None when no column is playable (the game is a draw).
    Always returns a legal column otherwise.
    """
    return search_root(board, depth=depth, rng=rng, stats=stats).column


@dataclass(slots=True)
class MinimaxAgent:
    name: str = "Arcade AI"
    depth: int = SEARCH_DEPTH
    rng: random.Random = field(default_factory=random.Random)

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Optional[Move]:
        # The engine always searches as the computer; mirror the board when
        # this agent is seated on the other side (benchmark self-play).
        board = state.board if state.current == COMPUTER else state.board.swapped()

        stats = SearchStats()
        start = time.perf_counter()

        result = search_root(board, depth=self.depth, rng=self.rng, stats=stats)
        move = result.column

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": int(result.score),
            "move_col": int(move) + 1 if move is not None else None,
            "time_ms": max(1, int(elapsed * 1000)),
        }

        logger.debug(
            "%s chose %s (d=%d nodes=%d cut=%d %dms)",
            self.name,
            self.last_info["move_col"],
            self.depth,
            stats.nodes,
            stats.cutoffs,
            self.last_info["time_ms"],
        )
        return move
