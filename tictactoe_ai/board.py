"""The 3x3 tic-tac-toe board and move-notation parsing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

SIZE = 3
EMPTY = " "
PLAYER = "X"
AI = "O"

_MARKS = frozenset({EMPTY, PLAYER, AI})
_ASCII_DIGITS = "0123456789"

Cell = tuple[int, int]


class InvalidMoveError(ValueError):
    """A move that does not name a cell on the board."""


class CellTakenError(InvalidMoveError):
    """A move onto a cell that already holds a mark."""


def _lines() -> Iterator[tuple[Cell, Cell, Cell]]:
    """Every winning line, in the order rows, columns, main and anti-diagonal."""
    for r in range(SIZE):
        yield (r, 0), (r, 1), (r, 2)
    for c in range(SIZE):
        yield (0, c), (1, c), (2, c)
    yield (0, 0), (1, 1), (2, 2)
    yield (0, 2), (1, 1), (2, 0)


class Board:
    """A 3x3 grid of marks: ``" "`` for empty, ``"X"`` or ``"O"``."""

    def __init__(self, rows: Iterable[Iterable[str]] | None = None) -> None:
        if rows is None:
            self._cells = [[EMPTY] * SIZE for _ in range(SIZE)]
            return
        cells = [list(row) for row in rows]
        if len(cells) != SIZE or any(len(row) != SIZE for row in cells):
            raise ValueError(f"a board needs {SIZE} rows of {SIZE} cells")
        if any(mark not in _MARKS for row in cells for mark in row):
            raise ValueError("cells must be ' ', 'X' or 'O'")
        self._cells = cells

    def __getitem__(self, cell: Cell) -> str:
        row, col = self._check(cell)
        return self._cells[row][col]

    def __repr__(self) -> str:
        rows = ["".join(row) for row in self._cells]
        return f"Board({rows!r})"

    @staticmethod
    def _check(cell: Cell) -> Cell:
        row, col = cell
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMoveError("Invalid cell. Use A1–C3")
        return row, col

    def empty_cells(self) -> Iterator[Cell]:
        """Yield the empty cells in row-major order."""
        for r, row in enumerate(self._cells):
            for c, mark in enumerate(row):
                if mark == EMPTY:
                    yield r, c

    def place(self, row: int, col: int, mark: str) -> None:
        """Put ``mark`` on an empty cell."""
        if mark not in (PLAYER, AI):
            raise ValueError(f"unknown mark {mark!r}")
        self._check((row, col))
        if self._cells[row][col] != EMPTY:
            raise CellTakenError("Cell taken. Try again")
        self._cells[row][col] = mark

    def clear(self, row: int, col: int) -> None:
        """Empty a cell."""
        self._check((row, col))
        self._cells[row][col] = EMPTY

    def winner(self) -> str | None:
        """The mark holding a full line, or None."""
        for a, b, c in _lines():
            mark = self[a]
            if mark != EMPTY and mark == self[b] == self[c]:
                return mark
        return None

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return next(self.empty_cells(), None) is None

    def winning_move(self, mark: str) -> Cell | None:
        """The first empty cell (row-major) that would win for ``mark``."""
        for row, col in list(self.empty_cells()):
            self._cells[row][col] = mark
            try:
                if self.winner() == mark:
                    return row, col
            finally:
                self._cells[row][col] = EMPTY
        return None

    def render(self) -> str:
        """The board as text with row letters A–C and column numbers 1–3."""
        separator = "  |---|---|---\n"
        rows = [
            f"{chr(ord('A') + r)} | " + " | ".join(row) + "\n"
            for r, row in enumerate(self._cells)
        ]
        return "\n    1   2   3\n" + separator.join(rows) + "\n"


def parse_move(text: str) -> Cell:
    """Turn notation such as ``A1``, ``b3`` or ``2C`` into ``(row, col)``."""
    if len(text) != 2:
        raise InvalidMoveError("Invalid format. Use A1–C3")
    row_char, col_char = text[0].upper(), text[1]
    if row_char in _ASCII_DIGITS:
        row_char, col_char = col_char, row_char
    row = ord(row_char) - ord("A")
    col = ord(col_char) - ord("1")
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise InvalidMoveError("Invalid cell. Use A1–C3")
    return row, col