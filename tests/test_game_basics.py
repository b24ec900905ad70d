import pytest

from hotseat.game_basics import (
    WIN_PATTERNS,
    Board,
    Mark,
    deserialize_board,
    get_cell,
    get_winner,
    has_won,
    is_full,
    serialize_board,
    set_cell,
)

X, O = Mark.FIRST, Mark.SECOND

CANONICAL_LINES = [
    [(0, 0), (0, 1), (0, 2)], [(1, 0), (1, 1), (1, 2)], [(2, 0), (2, 1), (2, 2)],
    [(0, 0), (1, 0), (2, 0)], [(0, 1), (1, 1), (2, 1)], [(0, 2), (1, 2), (2, 2)],
    [(0, 0), (1, 1), (2, 2)], [(0, 2), (1, 1), (2, 0)],
]


def test_win_patterns_match_canonical_lines():
    as_idx = [[r * 3 + c for r, c in line] for line in CANONICAL_LINES]
    assert as_idx == WIN_PATTERNS


def test_set_cell_returns_new_board_and_keeps_original():
    b = Board.empty()
    b2 = set_cell(b, 1, 2, X)
    assert get_cell(b2, 1, 2) is X
    assert get_cell(b, 1, 2) is None
    assert b == Board.empty()
    assert serialize_board(b2) == "000001000"


def test_set_cell_indexing_is_row_major():
    b = set_cell(Board.empty(), 2, 0, O)
    assert b.cells[6] is O


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_cell_access_rejects_off_board(row, col):
    with pytest.raises(ValueError):
        get_cell(Board.empty(), row, col)
    with pytest.raises(ValueError):
        set_cell(Board.empty(), row, col, X)


def test_board_rejects_wrong_size_and_values():
    with pytest.raises(ValueError):
        Board((None,) * 8)
    with pytest.raises(ValueError):
        Board(("X",) + (None,) * 8)


@pytest.mark.parametrize("line", CANONICAL_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_has_won_each_line(line, mark):
    b = Board.empty()
    for r, c in line:
        b = set_cell(b, r, c, mark)
    assert has_won(b, mark)
    assert not has_won(b, mark.other)


def test_has_won_false_on_empty_and_no_line_boards():
    assert not has_won(Board.empty(), X)
    assert not has_won(Board.empty(), O)
    # X O X / X O O / O X X
    b = deserialize_board("121122211")
    assert not has_won(b, X)
    assert not has_won(b, O)
    assert get_winner(b) is None


def test_is_full_only_with_nine_marks():
    b = Board.empty()
    order = [(0, 0), (1, 1), (0, 1), (0, 2), (2, 0), (1, 0), (1, 2), (2, 1), (2, 2)]
    mark = X
    for r, c in order:
        assert not is_full(b)
        b = set_cell(b, r, c, mark)
        mark = mark.other
    assert is_full(b)
    assert b.occupied() == 9


def test_full_board_with_line_is_a_win():
    # X X X / O O X / X O O
    b = deserialize_board("111221122")
    assert is_full(b)
    assert has_won(b, X)
    assert get_winner(b) is X


def test_serialize_roundtrip_and_errors():
    s = "102000120"
    assert serialize_board(deserialize_board(s)) == s
    for bad in ["", "12345678x", "0000000000", "abc"]:
        with pytest.raises(ValueError):
            deserialize_board(bad)


def test_mark_toggle_is_its_own_inverse():
    assert X.other is O
    assert O.other is X
    assert X.other.other is X
    assert X.symbol == "X" and O.symbol == "O"


def test_rows_yield_three_triples():
    b = deserialize_board("120000002")
    rows = list(b.rows())
    assert rows == [(X, O, None), (None, None, None), (None, None, O)]
