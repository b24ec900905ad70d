"""
Game basics: marks, the immutable board, cell lookup/update and win/draw checks.
Notes:
- A board is a flat tuple of 9 cells indexed by row * 3 + col; None is empty.
- X (Mark.FIRST) always starts.
- Updating a cell builds a new Board; boards are never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

import numpy as np


class Mark(Enum):
    FIRST = "X"
    SECOND = "O"

    @property
    def other(self) -> "Mark":
        return Mark.SECOND if self is Mark.FIRST else Mark.FIRST

    @property
    def symbol(self) -> str:
        return self.value


Cell = Optional[Mark]

SIZE = 3

WIN_PATTERNS = [
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
]

_PATTERN_TABLE = np.array(WIN_PATTERNS, dtype=np.intp)

# board string encoding: 0=empty, 1=X, 2=O
_ENCODE = {None: "0", Mark.FIRST: "1", Mark.SECOND: "2"}
_DECODE = {v: k for k, v in _ENCODE.items()}


@dataclass(frozen=True)
class Board:
    cells: Tuple[Cell, ...] = (None,) * 9

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != SIZE * SIZE:
            raise ValueError(f"Board needs {SIZE * SIZE} cells, got {len(cells)}")
        for c in cells:
            if c is not None and not isinstance(c, Mark):
                raise ValueError(f"Invalid cell value: {c!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for r in range(SIZE):
            yield self.cells[r * SIZE:(r + 1) * SIZE]

    def occupied(self) -> int:
        return sum(1 for c in self.cells if c is not None)


def _index(row: int, col: int) -> int:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell ({row},{col}) is off the board")
    return row * SIZE + col


def get_cell(board: Board, row: int, col: int) -> Cell:
    return board.cells[_index(row, col)]


def set_cell(board: Board, row: int, col: int, mark: Mark) -> Board:
    """Return a copy of ``board`` with (row, col) holding ``mark``.

    Occupancy is not checked here; the move engine rejects occupied cells
    before calling this.
    """
    idx = _index(row, col)
    lst = list(board.cells)
    lst[idx] = mark
    return Board(tuple(lst))


def serialize_board(board: Board) -> str:
    return ''.join(_ENCODE[c] for c in board.cells)


def deserialize_board(board_str: str) -> Board:
    raw = board_str.strip()
    if len(raw) != SIZE * SIZE or any(c not in _DECODE for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    return Board(tuple(_DECODE[c] for c in raw))


def has_won(board: Board, mark: Mark) -> bool:
    owned = np.fromiter((c is mark for c in board.cells), dtype=bool, count=SIZE * SIZE)
    return bool(owned[_PATTERN_TABLE].all(axis=1).any())


def is_full(board: Board) -> bool:
    return all(c is not None for c in board.cells)


def get_winner(board: Board) -> Optional[Mark]:
    # X is checked first, matching the loop's precedence
    for mark in (Mark.FIRST, Mark.SECOND):
        if has_won(board, mark):
            return mark
    return None
