"""
Move engine: game state, move requests and move application.

apply_move is a pure function of (state, request). It either returns the next
GameState or raises a MoveError; the input state is never touched, so callers
keep using it after a rejection.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .game_basics import (
    SIZE,
    Board,
    Mark,
    get_cell,
    has_won,
    is_full,
    serialize_board,
    set_cell,
)


class MoveError(ValueError):
    message = "Illegal move."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidMove(MoveError):
    """Target cell is already occupied."""

    message = "Invalid move."


class OutOfRange(MoveError):
    """Row or column outside 0-2."""

    message = "Illegal move."


class GameOver(MoveError):
    """A move was attempted on a finished game."""

    message = "Game over."


@dataclass(frozen=True)
class MoveRequest:
    row: int
    col: int


@dataclass(frozen=True)
class GameState:
    board: Board = field(default_factory=Board.empty)
    to_move: Mark = Mark.FIRST

    @classmethod
    def initial(cls) -> "GameState":
        return cls(Board.empty(), Mark.FIRST)

    def is_terminal(self) -> bool:
        b = self.board
        return has_won(b, Mark.FIRST) or has_won(b, Mark.SECOND) or is_full(b)


def apply_move(state: GameState, request: MoveRequest) -> GameState:
    if state.is_terminal():
        raise GameOver()
    row, col = request.row, request.col
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        logging.debug("rejecting off-board request (%d,%d)", row, col)
        raise OutOfRange()
    if get_cell(state.board, row, col) is not None:
        raise InvalidMove()
    board = set_cell(state.board, row, col, state.to_move)
    logging.debug("%s plays (%d,%d) -> %s", state.to_move.symbol, row, col, serialize_board(board))
    return GameState(board, state.to_move.other)
