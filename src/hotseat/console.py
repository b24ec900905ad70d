"""
Console I/O for the game: prompt, input grammar, board rendering and messages.

Streams are injected so games can be driven from io.StringIO in tests.
"""
from __future__ import annotations

import logging
import re
import sys
from enum import Enum
from typing import Optional, TextIO, Union

from .engine import GameState, MoveRequest
from .game_basics import Board, Cell, Mark

BANNER = "row and col each can be 0, 1, or 2.  Top left is 0,0."
DIVIDER = "-----------"
PROMPT = "Enter row,col for next move for {mark}, or q to quit: "

ILLEGAL_MOVE = "Illegal move."
WIN_MESSAGE = "Player {mark} has won -- game over."
DRAW_MESSAGE = "The board is full, no winner -- game over."

_MOVE_RE = re.compile(r"([0-2]),([0-2])")


class Command(Enum):
    QUIT = "quit"
    ILLEGAL = "illegal"


UserInput = Union[MoveRequest, Command]


def parse_input(raw: str) -> UserInput:
    """Parse one line of user input.

    ``q`` quits, ``r,c`` with digits 0-2 is a move (first digit is the row),
    anything else is illegal.
    """
    text = raw.strip()
    if text == "q":
        return Command.QUIT
    m = _MOVE_RE.fullmatch(text)
    if m is None:
        return Command.ILLEGAL
    return MoveRequest(row=int(m.group(1)), col=int(m.group(2)))


def cell_symbol(cell: Cell) -> str:
    return " " if cell is None else cell.symbol


def format_row(cells) -> str:
    return " " + " | ".join(cell_symbol(c) for c in cells) + " "


def format_board(board: Board) -> str:
    rows = [format_row(r) for r in board.rows()]
    return "\n" + f"\n{DIVIDER}\n".join(rows) + "\n\n"


class Console:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, line: str) -> None:
        self.stdout.write(line + "\n")

    def banner(self) -> None:
        self.say(BANNER)

    def render(self, board: Board) -> None:
        self.stdout.write(format_board(board))

    def read_input(self, state: GameState) -> UserInput:
        self.stdout.write(PROMPT.format(mark=state.to_move.symbol))
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            logging.debug("end of input, quitting")
            return Command.QUIT
        return parse_input(line)

    def report(self, message: str) -> None:
        self.say(message)

    def announce_win(self, mark: Mark) -> None:
        self.say(WIN_MESSAGE.format(mark=mark.symbol))

    def announce_draw(self) -> None:
        self.say(DRAW_MESSAGE)
