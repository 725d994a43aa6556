"""Command that advances a snake board by one step."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

from snakeboard.snake_utils import deterministic_food
from snakeboard.state import create_default_state, load_board


def _usage(prog: str) -> int:
    print(f"Usage: {prog} [-i filename] [-o filename]", file=sys.stderr)
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Step a board once; read it from -i (or use the default) and write it to -o (or stdout)."""
    prog = Path(sys.argv[0]).name or "snakeboard"
    args = list(sys.argv[1:] if argv is None else argv)
    in_filename: Optional[str] = None
    out_filename: Optional[str] = None

    rest = iter(args)
    for arg in rest:
        if arg in ("-i", "-o"):
            value = next(rest, None)
            if value is None:
                return _usage(prog)
            if arg == "-i":
                in_filename = value
            else:
                out_filename = value
            continue
        return _usage(prog)

    if in_filename is not None:
        try:
            state = load_board(in_filename)
        except FileNotFoundError:
            return -1
        state.initialize_snakes()
    else:
        state = create_default_state()

    state.update_state(deterministic_food)

    if out_filename is not None:
        state.save_board(out_filename)
    else:
        state.print_board(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())