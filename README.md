# tictactoe-ai

Play tic-tac-toe in your terminal against a computer opponent. You are `X`,
the computer is `O`.

## Install

```
pip install .
```

## Play

```
tictactoe-ai
```

The game reads whitespace-separated answers from standard input.

You are asked first whether you want to move first. Only an answer that
starts with `y` or `Y` means yes. Next you pick a difficulty. The game asks
again until you enter `1`, `2` or `3`:

1. **Easy**: the computer picks a random empty cell.
2. **Medium**: the computer takes a winning move if it has one. Otherwise it
   blocks your winning move if you have one. Otherwise it plays at random.
3. **Hard**: the computer scores every line of play with minimax. It takes
   the first cell, in row-major order, with the best score.

Rows are labelled `A` to `C` and columns `1` to `3`:

```
    1   2   3
A |   |   |  
  |---|---|---
B |   | X |  
  |---|---|---
C |   |   | O
```

Enter a move as a letter and a digit. Either order and either case works:
`A1`, `b3` and `2C` are all valid. The game tells you when a move is not two
characters, names a cell off the board, or names a cell that is already
taken, and then asks again. The board is printed after every move. The game
ends when someone completes a row, column or diagonal, or when the board is
full. It then announces a win, a loss or a draw.

If input runs out before the game ends, the command exits with status 1.

## Use as a library

```python
import random

from tictactoe_ai.ai import Difficulty, choose_move
from tictactoe_ai.board import Board, parse_move

board = Board()
row, col = parse_move("B2")
board.place(row, col, "X")
choose_move(board, Difficulty.HARD, random.Random())
print(board.render())
print(board.winner(), board.is_full())
```

`tictactoe_ai.board` provides the following:

- `Board(rows=None)`: an empty board, or one built from three rows of
  `" "`, `"X"` or `"O"`.
- Indexing by cell: `board[row, col]` returns the mark in that cell.
- `empty_cells()`: yields the empty cells in row-major order.
- `place(row, col, mark)` and `clear(row, col)`: set or empty a cell.
- `winner()`: returns `"X"`, `"O"` or `None`.
- `is_full()`: tells whether the board is full.
- `winning_move(mark)`: returns the first cell that would win for `mark`,
  or `None`.
- `render()`: returns the board as text.
- `parse_move(text)`: turns move notation into `(row, col)`.

`parse_move` raises `InvalidMoveError` for malformed input and for cells off
the board. `Board.place` raises `CellTakenError` when the cell is already
occupied. `CellTakenError` is a subclass of `InvalidMoveError`, and that in
turn is a subclass of `ValueError`.

`tictactoe_ai.ai` provides the following:

- The `Difficulty` enum: `EASY`, `MEDIUM` and `HARD`.
- `evaluate(board)`: returns +10 for a computer win, -10 for a player win,
  and 0 otherwise.
- `minimax(board, maximizing)`: returns the best score reachable from the
  board.
- Move functions: `easy_move(board, rng)`, `medium_move(board, rng)`,
  `hard_move(board)` and `choose_move(board, difficulty, rng)`. Each places
  the computer's mark and returns its cell.

`tictactoe_ai.game.play_game(read, write, rng)` plays a full game. It takes
any input callable and any output callable. It returns the winning mark, or
`None` for a draw. You can use it to script a game or to connect another
front end.

## Tests

```
pip install ".[test]"
pytest
```