"""Command line entry point for the snakes-and-ladders simulation."""

from __future__ import annotations

import argparse
import random
import re
import sys

from laddersim.board import classic_board
from laddersim.stats import format_report, run_simulations

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Read a leading integer from ``text``; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the positional settings; missing ones take their defaults."""
    parser = argparse.ArgumentParser(
        prog="laddersim",
        description="Simulate games of snakes and ladders on the classic layout.",
    )
    parser.add_argument("board_size", nargs="?", type=_atoi, default=100)
    parser.add_argument("games", nargs="?", type=_atoi, default=10000)
    parser.add_argument("die_sides", nargs="?", type=_atoi, default=6)
    parser.add_argument(
        "exact_win", nargs="?", type=_atoi, default=1,
        help="1 to require landing exactly on the last square, 0 to allow overshoot",
    )
    parser.add_argument("max_turns", nargs="?", type=_atoi, default=1000)
    options, _ = parser.parse_known_args(argv)
    return options


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and print the board and the statistics."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    board = classic_board(options.board_size)
    print(board.describe(), end="")
    print(
        f"Running {options.games} games on {options.board_size}-sized board "
        f"with {options.die_sides}-sided die, exact_win={options.exact_win}, "
        f"max_turns={options.max_turns}"
    )
    stats = run_simulations(
        board,
        options.games,
        options.die_sides,
        bool(options.exact_win),
        options.max_turns,
        random.Random(),
    )
    print(format_report(stats, board), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())