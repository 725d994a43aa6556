"""Food placement, steering and pseudo-random helpers for the snake game."""

from __future__ import annotations

from dataclasses import dataclass

from snakeboard.state import GameState

KEY_MOVEUP = "w"
KEY_MOVERIGHT = "d"
KEY_MOVEDOWN = "s"
KEY_MOVELEFT = "a"
KEY_QUIT = "q"

_MASK = 0xFFFFFFFF
_TAPS = 0x80000057
_TURN_HEADS = "<v>^"


def det_rand(value: int) -> int:
    """Return the successor of ``value`` in a 32-bit linear-feedback shift register."""
    value &= _MASK
    if value == 0:
        value = 1
    if value & 1:
        return (value >> 1) ^ _TAPS
    return value >> 1


@dataclass
class DetRand:
    """A deterministic generator stepping :func:`det_rand` from a seed."""

    state: int = 1

    def next(self) -> int:
        """Advance the generator and return the new value."""
        self.state = det_rand(self.state)
        return self.state


_food_rng = DetRand()
_turn_rng = DetRand()


def get_num_cols(state: GameState, row: int) -> int:
    """Width of ``row``, not counting trailing newline characters."""
    cells = state.board[row]
    num_cols = len(cells)
    while num_cols > 0 and cells[num_cols - 1] == "\n":
        num_cols -= 1
    return num_cols


def deterministic_food(state: GameState) -> tuple[int, int]:
    """Place food on a free cell chosen by the shared generator.

    Returns the position of the new food. Raises ValueError if the board
    has no free cell.
    """
    if not any(ch == " " for row in state.board for ch in row):
        raise ValueError("no free cell for food")
    while True:
        row = _food_rng.next() % state.num_rows
        col = _food_rng.next() % get_num_cols(state, row)
        if state.board[row][col] == " ":
            break
    state.board[row][col] = "*"
    return row, col


def corner_food(state: GameState) -> tuple[int, int]:
    """Place food just inside the top-left corner of the board."""
    state.board[1][1] = "*"
    return 1, 1


def redirect_snake(state: GameState, input_direction: str) -> None:
    """Point the head of the first snake in the direction of a wasd key."""
    snake = state.snakes[0]
    if not snake.live:
        return
    if input_direction in (KEY_MOVEUP, KEY_MOVELEFT, KEY_MOVEDOWN, KEY_MOVERIGHT):
        state.set_board_at(snake.head_row, snake.head_col, input_direction.upper())


def random_turn(state: GameState, snum: int) -> None:
    """Turn snake ``snum`` left or right at random."""
    snake = state.snakes[snum]
    cur_head = state.get_board_at(snake.head_row, snake.head_col)
    i = _TURN_HEADS.find(cur_head) if len(cur_head) == 1 else -1
    if i < 0:
        i = len(_TURN_HEADS)
    i += 1 if _turn_rng.next() % 2 == 0 else -1
    state.set_board_at(snake.head_row, snake.head_col, _TURN_HEADS[i % 4])