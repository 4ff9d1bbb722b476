"""Interactive console game against the computer."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterator, Sequence

from .ai import Difficulty, choose_move
from .board import AI, PLAYER, Board, InvalidMoveError, parse_move

Reader = Callable[[], str]
Writer = Callable[[str], object]


def ask_player_first(read: Reader, write: Writer) -> bool:
    """Ask whether the player moves first; only an answer starting y/Y counts."""
    write("Do you want to play first? (y/n): ")
    answer = read()
    return answer[:1] in ("y", "Y")


def ask_difficulty(read: Reader, write: Writer) -> Difficulty:
    """Ask for a difficulty level, repeating until 1, 2 or 3 is given."""
    write("Choose AI difficulty:\n")
    write("1 - Easy (random)\n")
    write("2 - Medium (block human wins)\n")
    write("3 - Hard (unbeatable)\n")
    while True:
        try:
            return Difficulty(int(read()))
        except ValueError:
            write("Invalid choice. Choose 1, 2, or 3: ")


def read_player_move(board: Board, read: Reader, write: Writer) -> tuple[int, int]:
    """Read moves until a valid one is given, place it, and return its cell."""
    write("Your move (e.g., A1, B3): ")
    while True:
        try:
            row, col = parse_move(read())
            board.place(row, col, PLAYER)
        except InvalidMoveError as exc:
            write(f"{exc}: ")
        else:
            return row, col


def play_game(
    read: Reader, write: Writer, rng: random.Random | None = None
) -> str | None:
    """Play one game and return the winning mark, or None for a draw."""
    board = Board()
    player_turn = ask_player_first(read, write)
    difficulty = ask_difficulty(read, write)
    write(board.render())

    while True:
        if player_turn:
            read_player_move(board, read, write)
        else:
            write("AI is thinking...\n")
            choose_move(board, difficulty, rng)
        write(board.render())
        winner = board.winner()
        if winner is not None or board.is_full():
            break
        player_turn = not player_turn

    if winner == PLAYER:
        write("🎉 You win!\n")
    elif winner == AI:
        write("💻 AI wins!\n")
    else:
        write("It's a draw!\n")
    return winner


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one game on the console."""
    tokens = _stdin_tokens()

    def read() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise EOFError from None

    def write(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    try:
        play_game(read, write)
    except EOFError:
        write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())