"""
Game loop: terminal-status evaluation and turn orchestration.

Status precedence each turn: X wins, then O wins, then full board (draw).
A board that is both full and holds a line is a win.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .console import ILLEGAL_MOVE, Command, Console
from .engine import GameState, MoveError, OutOfRange, apply_move
from .game_basics import Mark, has_won, is_full


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"
    QUIT = "quit"


@dataclass(frozen=True)
class GameResult:
    status: Status
    winner: Optional[Mark]
    state: GameState
    moves: int


def evaluate(state: GameState) -> Tuple[Status, Optional[Mark]]:
    b = state.board
    if has_won(b, Mark.FIRST):
        return Status.WON, Mark.FIRST
    if has_won(b, Mark.SECOND):
        return Status.WON, Mark.SECOND
    if is_full(b):
        return Status.DRAW, None
    return Status.IN_PROGRESS, None


def play(console: Console, state: Optional[GameState] = None, show_intro: bool = True) -> GameResult:
    """Run one game until a win, a draw or a quit request."""
    if state is None:
        state = GameState.initial()
    if show_intro:
        console.banner()
        console.render(state.board)
    moves = 0
    while True:
        status, winner = evaluate(state)
        if status is Status.WON:
            console.announce_win(winner)
            break
        if status is Status.DRAW:
            console.announce_draw()
            break

        user_input = console.read_input(state)
        if user_input is Command.QUIT:
            status = Status.QUIT
            break
        if user_input is Command.ILLEGAL:
            console.report(ILLEGAL_MOVE)
            continue
        try:
            state = apply_move(state, user_input)
        except OutOfRange:
            console.report(ILLEGAL_MOVE)
            continue
        except MoveError as e:
            logging.debug("move (%d,%d) rejected: %s", user_input.row, user_input.col, e)
            console.report(str(e))
            continue
        moves += 1
        console.render(state.board)

    logging.debug("game finished: status=%s winner=%s moves=%d",
                  status.value, winner.symbol if winner else None, moves)
    return GameResult(status, winner, state, moves)
