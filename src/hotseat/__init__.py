"""hotseat package.

Two-player console tic-tac-toe: immutable board model, move engine,
win/draw detection and a line-oriented game loop.

Convenience imports are exposed for common workflows.
"""

from .engine import GameOver, GameState, InvalidMove, MoveError, MoveRequest, OutOfRange, apply_move
from .game_basics import Board, Mark, get_cell, get_winner, has_won, is_full, set_cell
from .loop import GameResult, Status, evaluate, play

__all__ = [
    "Board",
    "Mark",
    "get_cell",
    "set_cell",
    "has_won",
    "is_full",
    "get_winner",
    "GameState",
    "MoveRequest",
    "apply_move",
    "MoveError",
    "InvalidMove",
    "OutOfRange",
    "GameOver",
    "Status",
    "GameResult",
    "evaluate",
    "play",
]
