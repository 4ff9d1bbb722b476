"""Computer opponents at three difficulty levels."""

from __future__ import annotations

import random
from enum import IntEnum

from .board import AI, PLAYER, Board, Cell

WIN_SCORE = 10


class Difficulty(IntEnum):
    """How hard the computer plays."""

    EASY = 1
    MEDIUM = 2
    HARD = 3


def evaluate(board: Board) -> int:
    """+10 if the computer has won, -10 if the player has, else 0."""
    winner = board.winner()
    if winner == AI:
        return WIN_SCORE
    if winner == PLAYER:
        return -WIN_SCORE
    return 0


def minimax(board: Board, maximizing: bool) -> int:
    """The best score reachable from ``board`` with the side to move given."""
    score = evaluate(board)
    if score in (WIN_SCORE, -WIN_SCORE) or board.is_full():
        return score

    mark, pick = (AI, max) if maximizing else (PLAYER, min)
    scores = []
    for row, col in list(board.empty_cells()):
        board.place(row, col, mark)
        try:
            scores.append(minimax(board, not maximizing))
        finally:
            board.clear(row, col)
    return pick(scores)


def _rng(rng: random.Random | None) -> random.Random:
    return random.Random() if rng is None else rng


def easy_move(board: Board, rng: random.Random | None = None) -> Cell:
    """Place the computer's mark on a random empty cell."""
    cells = list(board.empty_cells())
    if not cells:
        raise ValueError("no empty cell left")
    row, col = _rng(rng).choice(cells)
    board.place(row, col, AI)
    return row, col


def medium_move(board: Board, rng: random.Random | None = None) -> Cell:
    """Win if possible, else block the player's win, else move at random."""
    cell = board.winning_move(AI) or board.winning_move(PLAYER)
    if cell is None:
        return easy_move(board, rng)
    board.place(*cell, AI)
    return cell


def hard_move(board: Board) -> Cell:
    """Place the computer's mark on the first cell with the best minimax score."""
    best_cell: Cell | None = None
    best_score = None
    for row, col in list(board.empty_cells()):
        board.place(row, col, AI)
        try:
            score = minimax(board, False)
        finally:
            board.clear(row, col)
        if best_score is None or score > best_score:
            best_cell, best_score = (row, col), score
    if best_cell is None:
        raise ValueError("no empty cell left")
    board.place(*best_cell, AI)
    return best_cell


def choose_move(
    board: Board, difficulty: Difficulty | int, rng: random.Random | None = None
) -> Cell:
    """Make the computer's move at the given difficulty and return its cell."""
    level = Difficulty(difficulty)
    if level is Difficulty.EASY:
        return easy_move(board, rng)
    if level is Difficulty.MEDIUM:
        return medium_move(board, rng)
    return hard_move(board)