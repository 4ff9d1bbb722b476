import pytest

from tictactoe_ai.board import (
    AI,
    EMPTY,
    PLAYER,
    SIZE,
    Board,
    CellTakenError,
    InvalidMoveError,
    parse_move,
)


def test_new_board_is_empty():
    board = Board()
    cells = list(board.empty_cells())
    assert len(cells) == SIZE * SIZE
    assert all(board[cell] == EMPTY for cell in cells)
    assert board.winner() is None
    assert not board.is_full()


def test_place_and_read_back():
    board = Board()
    board.place(1, 2, PLAYER)
    assert board[1, 2] == PLAYER
    assert (1, 2) not in list(board.empty_cells())


def test_clear_empties_cell():
    board = Board()
    board.place(0, 0, AI)
    board.clear(0, 0)
    assert board[0, 0] == EMPTY


def test_place_on_taken_cell():
    board = Board()
    board.place(0, 0, PLAYER)
    with pytest.raises(CellTakenError):
        board.place(0, 0, AI)
    assert board[0, 0] == PLAYER


@pytest.mark.parametrize("cell", [(-1, 0), (0, SIZE), (SIZE, 0)])
def test_place_out_of_range(cell):
    with pytest.raises(InvalidMoveError):
        Board().place(*cell, PLAYER)


def test_place_rejects_unknown_mark():
    with pytest.raises(ValueError):
        Board().place(0, 0, "Z")


@pytest.mark.parametrize(
    "rows",
    [["XX", "   ", "   "], ["   ", "   "], ["ZZZ", "   ", "   "]],
)
def test_bad_rows_rejected(rows):
    with pytest.raises(ValueError):
        Board(rows)


@pytest.mark.parametrize(
    "rows, mark",
    [
        (["XXX", "OO ", "   "], "X"),
        (["O X", "OX ", "O  "], "O"),
        (["X O", " XO", "  X"], "X"),
        (["X O", " OX", "O  "], "O"),
    ],
)
def test_winner_lines(rows, mark):
    assert Board(rows).winner() == mark


def test_full_board_without_winner():
    board = Board(["XOX", "XOO", "OXX"])
    assert board.is_full()
    assert board.winner() is None


def test_winning_move_found_and_board_untouched():
    board = Board(["XX ", "OO ", "   "])
    before = board.render()
    cell = board.winning_move(PLAYER)
    assert board.render() == before
    board.place(*cell, PLAYER)
    assert board.winner() == PLAYER


def test_winning_move_absent():
    assert Board(["X  ", " O ", "   "]).winning_move(PLAYER) is None


def test_render_layout():
    board = Board()
    text = board.render()
    assert text.startswith("\n    1   2   3\n")
    assert text.count("  |---|---|---\n") == SIZE - 1
    assert text.endswith("\n\n")


def test_render_shows_marks():
    board = Board()
    board.place(2, 0, AI)
    lines = board.render().splitlines()
    c_row = next(line for line in lines if line.startswith("C |"))
    assert AI in c_row
    assert PLAYER not in board.render()


def test_parse_move_pinned():
    assert parse_move("A1") == (0, 0)
    assert parse_move("C3") == (2, 2)


@pytest.mark.parametrize("text, same", [("a1", "A1"), ("1A", "A1"), ("3C", "C3"), ("b2", "B2")])
def test_parse_move_equivalent_forms(text, same):
    assert parse_move(text) == parse_move(same)


@pytest.mark.parametrize("text", ["", "A", "A12", "D1", "A4", "A0", "AB", "1a"])
def test_parse_move_invalid(text):
    with pytest.raises(InvalidMoveError):
        parse_move(text)


def test_parse_move_format_message():
    with pytest.raises(InvalidMoveError, match="Invalid format"):
        parse_move("A")