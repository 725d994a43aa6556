"""Board state for the snake game: loading, rendering and stepping snakes."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

TAIL_CHARS = "wasd"
HEAD_CHARS = "WASDx"
BODY_CHARS = "^<v>"

DEFAULT_BOARD_WIDTH = 20
DEFAULT_BOARD_HEIGHT = 18

_BODY_TO_TAIL = {"^": "w", "<": "a", "v": "s", ">": "d"}
_HEAD_TO_BODY = {"W": "^", "A": "<", "S": "v", "D": ">"}


def is_tail(c: str) -> bool:
    """Return True if ``c`` is a snake tail character ("wasd")."""
    return len(c) == 1 and c in TAIL_CHARS


def is_head(c: str) -> bool:
    """Return True if ``c`` is a snake head character ("WASDx")."""
    return len(c) == 1 and c in HEAD_CHARS


def is_snake(c: str) -> bool:
    """Return True if ``c`` is any part of a snake ("wasd^<v>WASDx")."""
    return is_tail(c) or is_head(c) or (len(c) == 1 and c in BODY_CHARS)


def body_to_tail(c: str) -> str:
    """Map a body character ("^<v>") to its tail character, or '?'."""
    return _BODY_TO_TAIL.get(c, "?")


def head_to_body(c: str) -> str:
    """Map a head character ("WASD") to its body character, or '?'."""
    return _HEAD_TO_BODY.get(c, "?")


def get_next_row(cur_row: int, c: str) -> int:
    """Row reached by moving one step in the direction ``c`` points."""
    if c in ("v", "s", "S"):
        return cur_row + 1
    if c in ("^", "w", "W"):
        return cur_row - 1
    return cur_row


def get_next_col(cur_col: int, c: str) -> int:
    """Column reached by moving one step in the direction ``c`` points."""
    if c in (">", "d", "D"):
        return cur_col + 1
    if c in ("<", "a", "A"):
        return cur_col - 1
    return cur_col


@dataclass
class Snake:
    """Position of a snake's tail and head, and whether it is alive."""

    tail_row: int
    tail_col: int
    head_row: int = 0
    head_col: int = 0
    live: bool = True


FoodFunction = Callable[["GameState"], object]


@dataclass
class GameState:
    """A board of character rows and the snakes living on it."""

    board: list[list[str]]
    snakes: list[Snake] = field(default_factory=list)

    @property
    def num_rows(self) -> int:
        return len(self.board)

    @property
    def num_snakes(self) -> int:
        return len(self.snakes)

    def get_board_at(self, row: int, col: int) -> str:
        """Return the character at ``(row, col)``."""
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is outside the board")
        return self.board[row][col]

    def set_board_at(self, row: int, col: int, ch: str) -> None:
        """Replace the character at ``(row, col)``."""
        if row < 0 or col < 0:
            raise IndexError(f"position ({row}, {col}) is outside the board")
        self.board[row][col] = ch

    def render(self) -> str:
        """Return the board as text, one newline-terminated line per row."""
        return "".join("".join(row) + "\n" for row in self.board)

    def print_board(self, fp: TextIO) -> None:
        """Write the board to an open text stream."""
        fp.write(self.render())

    def save_board(self, filename: Union[str, Path]) -> None:
        """Write the board to a file, replacing its contents."""
        with open(filename, "w", encoding="utf-8", newline="\n") as fp:
            self.print_board(fp)

    def _next_position(self, row: int, col: int) -> tuple[int, int]:
        c = self.get_board_at(row, col)
        return get_next_row(row, c), get_next_col(col, c)

    def next_square(self, snum: int) -> str:
        """Character of the cell the head of snake ``snum`` moves into next."""
        snake = self.snakes[snum]
        row, col = self._next_position(snake.head_row, snake.head_col)
        return self.get_board_at(row, col)

    def update_head(self, snum: int) -> None:
        """Advance the head of snake ``snum`` one cell, ignoring obstacles."""
        snake = self.snakes[snum]
        row, col = snake.head_row, snake.head_col
        head_char = self.get_board_at(row, col)
        next_row, next_col = get_next_row(row, head_char), get_next_col(col, head_char)
        self.set_board_at(row, col, head_to_body(head_char))
        self.set_board_at(next_row, next_col, head_char)
        snake.head_row, snake.head_col = next_row, next_col

    def update_tail(self, snum: int) -> None:
        """Advance the tail of snake ``snum`` one cell, clearing the old one."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        next_row, next_col = self._next_position(row, col)
        self.set_board_at(row, col, " ")
        next_char = self.get_board_at(next_row, next_col)
        self.set_board_at(next_row, next_col, body_to_tail(next_char))
        snake.tail_row, snake.tail_col = next_row, next_col

    def update_state(self, add_food: Optional[FoodFunction]) -> None:
        """Move every live snake one step, in order.

        A snake running into a wall or a snake dies and its head becomes 'x'.
        A snake eating food grows, and ``add_food`` (if given) places new food.
        """
        for snum, snake in enumerate(self.snakes):
            if not snake.live:
                continue
            nxt = self.next_square(snum)
            if nxt == "#" or is_snake(nxt):
                self.set_board_at(snake.head_row, snake.head_col, "x")
                snake.live = False
                continue
            self.update_head(snum)
            if nxt == "*":
                if add_food is not None:
                    add_food(self)
            else:
                self.update_tail(snum)

    def find_head(self, snum: int) -> None:
        """Follow snake ``snum`` from its tail and record where its head is."""
        snake = self.snakes[snum]
        row, col = snake.tail_row, snake.tail_col
        c = self.get_board_at(row, col)
        max_steps = sum(len(r) for r in self.board)
        steps = 0
        while not is_head(c):
            if not is_snake(c) or steps > max_steps:
                raise ValueError(
                    f"snake starting at ({snake.tail_row}, {snake.tail_col}) has no head"
                )
            row, col = get_next_row(row, c), get_next_col(col, c)
            c = self.get_board_at(row, col)
            steps += 1
        snake.head_row, snake.head_col = row, col

    def initialize_snakes(self) -> GameState:
        """Rebuild the snake list from the tails found on the board."""
        self.snakes = [
            Snake(tail_row=r, tail_col=c)
            for r, row in enumerate(self.board)
            for c, ch in enumerate(row)
            if is_tail(ch)
        ]
        for snum in range(len(self.snakes)):
            self.find_head(snum)
        return self


def create_default_state() -> GameState:
    """Return the standard 18x20 walled board with one snake and one food."""
    board = [
        [
            "#"
            if row in (0, DEFAULT_BOARD_HEIGHT - 1) or col in (0, DEFAULT_BOARD_WIDTH - 1)
            else " "
            for col in range(DEFAULT_BOARD_WIDTH)
        ]
        for row in range(DEFAULT_BOARD_HEIGHT)
    ]
    board[2][2] = "d"
    board[2][3] = ">"
    board[2][4] = "D"
    board[2][9] = "*"
    return GameState(board=board, snakes=[Snake(2, 2, 2, 4, True)])


def load_board(filename: Union[str, Path]) -> GameState:
    """Read a board from a file; the returned state has no snakes yet.

    Raises FileNotFoundError if the file does not exist.
    """
    with open(filename, "r", encoding="utf-8", newline="") as fp:
        rows = [line[:-1] if line.endswith("\n") else line for line in fp]
    return GameState(board=[list(row) for row in rows])