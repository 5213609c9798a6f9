from __future__ import annotations

import logging
import random
import sys
import time
from typing import Dict, Optional, Tuple

from arcade_connect4.ai.base import Agent
from arcade_connect4.config import AI_THINKING_SPINNER, AI_THINK_DELAY_SEC
from arcade_connect4.core.board import Board
from arcade_connect4.core.rules import winning_line
from arcade_connect4.errors import GameOverError
from arcade_connect4.game.state import (
    COMPUTER_WINS,
    DRAW,
    HUMAN_WINS,
    YOUR_TURN,
    GameState,
    Outcome,
)
from arcade_connect4.types import COMPUTER, HUMAN, Move, Side, other
from arcade_connect4.ui.render import render

logger = logging.getLogger(__name__)


def new_game(first: Side = HUMAN) -> GameState:
    return GameState(board=Board(), current=first, last_status=YOUR_TURN)


def _settle(state: GameState, mover: Side) -> GameState:
    """Check whether ``mover``'s last disc ended the game and update the outcome."""
    line = winning_line(state.board, mover)
    if line is not None:
        state.winning_line = line
        if mover == HUMAN:
            state.outcome = Outcome.HUMAN_WON
            state.last_status = HUMAN_WINS
        else:
            state.outcome = Outcome.COMPUTER_WON
            state.last_status = COMPUTER_WINS
        return state

    if state.board.is_full():
        state.outcome = Outcome.DRAW
        state.last_status = DRAW
        return state

    state.current = other(mover)
    return state


def apply_turn(state: GameState, column: Move) -> GameState:
    """
    Drop a disc for the side to move and return the resulting state.
    The input state is left untouched.
    """
    if state.finished:
        raise GameOverError("The game is already over.")

    nxt = GameState(
        board=state.board.copy(),
        current=state.current,
        last_status=state.last_status,
        outcome=state.outcome,
        winning_line=None,
    )
    nxt.board.drop(column, nxt.current)
    return _settle(nxt, state.current)


def play_turn(state: GameState, column: Move, agent: Agent) -> GameState:
    """
    One full round of the arcade game: the human's disc, then (if the game
    is still running) exactly one reply from ``agent``.

    Raises IllegalMoveError for a full column and GameOverError once the
    game has ended. The computer's move is never illegal.
    """
    if state.current != HUMAN:
        raise ValueError("It is not the human's turn.")

    state = apply_turn(state, column)
    if state.finished:
        return state

    reply = agent.choose_move(state)
    if reply is None:
        state.outcome = Outcome.DRAW
        state.last_status = DRAW
        return state

    state = apply_turn(state, reply)
    if not state.finished:
        state.last_status = f"{agent.name} chose {int(reply) + 1}. {YOUR_TURN}"
    return state


QUIT_WORDS = frozenset({"q", "quit", "exit"})


def read_column(raw: str, board: Board) -> Optional[Move]:
    """
    Turn what the player typed into a 0-based column, or None to leave the game.

    Columns are shown 1-based. A full column is refused here already, so the
    player is asked again before any disc is dropped.
    """
    text = raw.strip().lower()
    if text in QUIT_WORDS:
        return None
    if not text.isdecimal():
        raise ValueError(f"Type a column number 1-{board.cols}, or q to quit.")

    col = int(text) - 1
    if not 0 <= col < board.cols:
        raise ValueError(f"There is no column {text}. Pick 1-{board.cols}.")
    if board.drop_row(col) is None:
        raise ValueError(f"Column {text} is full. Pick another one.")
    return Move(col)


def think_pause(name: str, seconds: float = AI_THINK_DELAY_SEC) -> None:
    """Short pause before the computer's disc lands, with an optional spinner."""
    if not AI_THINKING_SPINNER or not sys.stdout.isatty():
        time.sleep(seconds)
        return

    frames = "|/-\\"
    steps = max(1, int(seconds / 0.07))
    for i in range(steps):
        sys.stdout.write(f"\r{name} is thinking {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(0.07)
    sys.stdout.write("\r" + " " * (len(name) + 14) + "\r")
    sys.stdout.flush()


def _status_line(state: GameState, agent: Agent) -> str:
    return f"You: H | {agent.name}: C\n{state.last_status}"


def run_game(agent: Agent, show_thinking: bool = True) -> GameState:
    """Interactive console game: the human plays H and always moves first."""
    state = new_game()

    while True:
        render(state.board, _status_line(state, agent), highlight=state.winning_line)

        if state.finished:
            return state

        try:
            raw = input("Your move: ")
            move = read_column(raw, state.board)
            if move is None:
                state.last_status = "You left the game."
                render(state.board, _status_line(state, agent))
                return state

            # Show the human disc while the computer is "thinking"
            preview = apply_turn(state, move)
            if not preview.finished:
                preview.last_status = f"{agent.name} is thinking..."
                render(preview.board, _status_line(preview, agent))
                if show_thinking:
                    think_pause(agent.name)

            state = play_turn(state, move, agent)
            logger.info("human played %d, outcome=%s", int(move) + 1, state.outcome.value)

        except ValueError as e:
            state.last_status = str(e)


def play_headless(
    agent_first: Agent,
    agent_second: Agent,
    rng: Optional[random.Random] = None,
    opening_moves: int = 0,
) -> Tuple[Outcome, Dict[Side, Dict[str, int]]]:
    """
    Play a full game without any UI. ``agent_first`` sits on the H side and
    moves first. ``opening_moves`` random discs are played before the agents
    take over, to vary the games.
    """
    rng = rng if rng is not None else random.Random()
    state = new_game(HUMAN)
    stats: Dict[Side, Dict[str, int]] = {
        HUMAN: {"moves": 0, "time_ms": 0, "nodes": 0},
        COMPUTER: {"moves": 0, "time_ms": 0, "nodes": 0},
    }

    for _ in range(opening_moves):
        moves = state.board.valid_moves()
        if not moves or state.finished:
            break
        state = apply_turn(state, rng.choice(moves))

    while not state.finished:
        agent = agent_first if state.current == HUMAN else agent_second
        move = agent.choose_move(state)
        if move is None:
            state.outcome = Outcome.DRAW
            break

        info = getattr(agent, "last_info", None) or {}
        side_stats = stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += max(1, int(info.get("time_ms", 0)))
        side_stats["nodes"] += int(info.get("nodes", 0))

        state = apply_turn(state, move)

    return state.outcome, stats
