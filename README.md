# snakeboard

Snake games on plain-text boards. A board is a text file with one row per
line:

- `#` is a wall, `*` is food and a space is empty floor.
- `w a s d` mark a snake's tail, `^ < v >` its body, and `W A S D` its head.
- `x` marks the head of a dead snake.

Each character points toward the next square of the snake. On each step, every
live snake moves one square in the direction its head points. The snakes move
in the order their tails appear on the board, reading row by row.

- A snake that would move into a wall (`#`) or into any part of a snake dies.
  Its head becomes `x`.
- A snake that moves onto food (`*`) grows by one square, and new food is
  placed on the board.

## Installation

```
pip install .
```

Playing interactively in a terminal uses `termios`, which is only available on
POSIX systems.

## Advancing a board by one step

```
snakeboard -i board.snk -o next.snk
```

This reads `board.snk`, finds every snake on it, advances the game by one
step and writes the result to `next.snk`.

- Without `-o`, the new board is written to standard output.
- Without `-i`, the built-in default board is used. It is 20 columns by
  18 rows, with one snake and one piece of food.
- Any other argument, or an option without a value, prints a usage line and
  exits with status 1.
- If the input file does not exist, `snakeboard.cli.main` returns -1. The
  shell usually reports this as exit status 255.

## Playing interactively

```
snakeboard-play -i board.snk -d 0.5
```

`-d` sets the starting delay between steps, in seconds. It defaults to 1. If
the delay cannot be read as a number, an error is printed and a delay of 0 is
used.

Keys while playing:

- `w`, `a`, `s` and `d` point the head of the first snake up, left, down or
  right, as long as that snake is alive.
- `[` makes the delay 0.1 seconds longer.
- `]` makes the delay 0.1 seconds shorter. It stops at 0.1 seconds, unless the
  delay is a whole number of seconds.

Every other snake turns left or right at random on every sixth step. Once no
snake is left alive, the board stops moving. There is no quit key: press
Ctrl-C to leave. When standard input is not a terminal, the game also ends at
the end of the input.

## Using the library

```python
from snakeboard.state import create_default_state, load_board
from snakeboard.snake_utils import deterministic_food

state = load_board("board.snk").initialize_snakes()
state.update_state(deterministic_food)
print(state.render(), end="")
```

`snakeboard.state` provides the board model:

- `GameState` holds `board`, a list of rows of characters, and `snakes`.
  It also has `num_rows` and `num_snakes`.
- `Snake` records a snake's tail and head positions and whether it is `live`.
- `create_default_state()` builds the default board.
- `load_board(filename)` reads a board and raises `FileNotFoundError` if the
  file is missing. The board it returns has no snakes until you call
  `initialize_snakes()`.
- `GameState` has these methods:
  - `get_board_at` and `set_board_at` read and write one cell.
  - `render`, `print_board` and `save_board` output the board.
  - `next_square`, `update_head`, `update_tail` and `update_state` move
    snakes.
  - `find_head` and `initialize_snakes` locate snakes on the board.
    `find_head` raises `ValueError` for a snake that has no head.

`update_state` takes a function that places new food, or `None`. The module
`snakeboard.snake_utils` provides two:

- `deterministic_food` places food on a free cell chosen by a 32-bit
  linear-feedback shift register (`det_rand`, `DetRand`). It returns the
  cell's position and raises `ValueError` when no cell is free. The
  generator is shared by the whole process, so the cell it picks depends on
  earlier calls.
- `corner_food` always places food at row 1, column 1.

The same module also has `redirect_snake(state, key)` and
`random_turn(state, snum)`, which steer snakes the same way the interactive
game does.

`snakeboard.interactive.InteractiveGame` runs a game on any text stream. It
has `handle_key`, `step`, `render`, `game_loop` and `input_loop`, plus
`slower` and `faster` to change the delay.