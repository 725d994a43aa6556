"""Interactive terminal snake game driven by the keyboard."""

from __future__ import annotations

import os
import sys
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from snakeboard.snake_utils import deterministic_food, random_turn, redirect_snake
from snakeboard.state import GameState, create_default_state, load_board

_NS_PER_SECOND = 1_000_000_000
_INTERVAL_STEP = 100_000_000
_CLEAR_SCREEN = "\033[2J\033[H"


def get_raw_char(stream: Optional[TextIO] = None) -> str:
    """Read one character without waiting for Enter; '' at end of input."""
    stream = sys.stdin if stream is None else stream
    if not stream.isatty():
        return stream.read(1)

    import termios

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return data.decode("latin-1")


class InteractiveGame:
    """A running game: the board, the step interval and the display stream."""

    def __init__(
        self,
        state: GameState,
        interval_ns: int = _NS_PER_SECOND,
        out: Optional[TextIO] = None,
    ) -> None:
        self.state = state
        self.interval_ns = interval_ns
        self.out = sys.stdout if out is None else out
        self._lock = threading.RLock()
        self._stopped = threading.Event()

    @property
    def interval(self) -> float:
        """Time between steps, in seconds."""
        return self.interval_ns / _NS_PER_SECOND

    def slower(self) -> None:
        """Lengthen the step interval by a tenth of a second."""
        with self._lock:
            sec, nsec = divmod(self.interval_ns, _NS_PER_SECOND)
            if nsec >= 900_000_000:
                self.interval_ns = (sec + 1) * _NS_PER_SECOND
            else:
                self.interval_ns += _INTERVAL_STEP

    def faster(self) -> None:
        """Shorten the step interval by a tenth of a second, down to a tenth."""
        with self._lock:
            sec, nsec = divmod(self.interval_ns, _NS_PER_SECOND)
            if nsec == 0 or sec > 0 or nsec > _INTERVAL_STEP:
                self.interval_ns -= _INTERVAL_STEP

    def handle_key(self, key: str) -> None:
        """Apply a key press: '[' slows, ']' speeds up, wasd steers."""
        with self._lock:
            if key == "[":
                self.slower()
            elif key == "]":
                self.faster()
            else:
                redirect_snake(self.state, key)

    def step(self, timestep: int) -> int:
        """Advance the game one step; return how many snakes were alive before it.

        Snakes other than the player's turn at random every sixth step.
        """
        with self._lock:
            live_snakes = 0
            for snum, snake in enumerate(self.state.snakes):
                if snake.live:
                    live_snakes += 1
                    if snum >= 1 and timestep % 6 == 0:
                        random_turn(self.state, snum)
            self.state.update_state(deterministic_food)
        return live_snakes

    def render(self) -> str:
        """Return the full-screen text for the current board."""
        with self._lock:
            return _CLEAR_SCREEN + self.state.render()

    def _show(self) -> None:
        self.out.write(self.render())
        self.out.flush()

    def game_loop(self) -> None:
        """Step and redraw until every snake is dead or the game is stopped."""
        timestep = 0
        self._show()
        while not self._stopped.wait(max(self.interval_ns, 0) / _NS_PER_SECOND):
            live_snakes = self.step(timestep)
            self._show()
            timestep += 1
            if live_snakes == 0:
                break

    def input_loop(self, read_key: Callable[[], str]) -> None:
        """Handle keys from ``read_key`` until it returns an empty string."""
        while True:
            key = read_key()
            if not key:
                break
            self.handle_key(key)
            self._show()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play on the board from -i (or the default one) with -d seconds per step."""
    prog = Path(sys.argv[0]).name or "snakeboard-interactive"
    args = list(sys.argv[1:] if argv is None else argv)
    in_filename: Optional[str] = None
    interval_ns = _NS_PER_SECOND

    rest = iter(args)
    for arg in rest:
        if arg in ("-i", "-d"):
            value = next(rest, None)
            if value is None:
                break
            if arg == "-i":
                in_filename = value
            else:
                try:
                    delay = float(value)
                except ValueError:
                    print(f"Error parsing delay: {value!r}", file=sys.stderr)
                    delay = 0.0
                interval_ns = int(delay) * _NS_PER_SECOND + int(delay * _NS_PER_SECOND) % _NS_PER_SECOND
            continue
        break
    else:
        args = []
    if args:
        print(f"Usage: {prog} [-i filename] [-d delay]", file=sys.stderr)
        return 1

    if in_filename is not None:
        try:
            state = load_board(in_filename)
        except FileNotFoundError:
            print(f"Error opening board: {in_filename}", file=sys.stderr)
            return -1
        state.initialize_snakes()
    else:
        state = create_default_state()

    game = InteractiveGame(state, interval_ns)
    thread = threading.Thread(target=game.game_loop, daemon=True)
    thread.start()
    try:
        game.input_loop(get_raw_char)
    finally:
        game._stopped.set()
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())