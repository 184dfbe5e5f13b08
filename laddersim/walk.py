"""Simulating walks of a single player over a graph board."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from laddersim.board import CLASSIC_LADDERS, CLASSIC_SNAKES
from laddersim.graph import GraphBoard, create_board


@dataclass(frozen=True)
class SnakeOrLadder:
    """A jump from ``start`` to ``end``."""

    start: int
    end: int


@dataclass
class Player:
    """State of a player after a walk."""

    max_steps: int
    position: int = 0
    roll_sequence: list[int] = field(default_factory=list)

    @property
    def rolls(self) -> int:
        """Number of rolls made."""
        return len(self.roll_sequence)


@dataclass
class WalkSummary:
    """Results over a batch of walks."""

    num_simulations: int
    total_rolls: int = 0
    min_rolls: int | None = None
    best_sequence: list[int] = field(default_factory=list)

    @property
    def average_rolls(self) -> float:
        """Rolls of won games divided by the number of games simulated."""
        if not self.num_simulations:
            return float("nan")
        return self.total_rolls / self.num_simulations


def roll_die_uniform(sides: int, rng: random.Random | None = None) -> int:
    """Roll a die with ``sides`` faces, returning 1..sides."""
    if sides < 1:
        raise ValueError(f"a die needs at least one side, got {sides}")
    return (rng or random).randint(1, sides)


def apply_snakes_ladders(
    pos: int,
    snakes: Iterable[SnakeOrLadder],
    ladders: Iterable[SnakeOrLadder],
) -> int:
    """Return where a player on ``pos`` ends up; snakes are checked first."""
    for jump in (*snakes, *ladders):
        if jump.start == pos:
            return jump.end
    return pos


def play_walk(
    board: GraphBoard,
    max_steps: int,
    snakes: Sequence[SnakeOrLadder] = (),
    ladders: Sequence[SnakeOrLadder] = (),
    sides: int = 6,
    rng: random.Random | None = None,
) -> Player:
    """Walk from square 0 towards the last square for at most ``max_steps`` rolls.

    A roll that would leave the board is forfeited.
    """
    player = Player(max_steps=max_steps)
    goal = board.size - 1
    while player.position < goal and player.rolls < max_steps:
        roll = roll_die_uniform(sides, rng)
        if player.position + roll < board.size:
            player.position += roll
        player.position = apply_snakes_ladders(player.position, snakes, ladders)
        player.roll_sequence.append(roll)
    return player


def simulate_games(
    num_simulations: int,
    board: GraphBoard,
    snakes: Sequence[SnakeOrLadder] = (),
    ladders: Sequence[SnakeOrLadder] = (),
    sides: int = 6,
    max_steps: int = 2000,
    rng: random.Random | None = None,
) -> WalkSummary:
    """Play ``num_simulations`` walks and keep the shortest winning one."""
    summary = WalkSummary(num_simulations=num_simulations)
    goal = board.size - 1
    for _ in range(num_simulations):
        player = play_walk(board, max_steps, snakes, ladders, sides, rng)
        if player.position != goal:
            continue
        summary.total_rolls += player.rolls
        if summary.min_rolls is None or player.rolls < summary.min_rolls:
            summary.min_rolls = player.rolls
            summary.best_sequence = player.roll_sequence
    return summary


def format_summary(summary: WalkSummary) -> str:
    """Render a summary as a text report."""
    shortest = "none" if summary.min_rolls is None else f"{summary.min_rolls} rolls"
    return (
        "\nSimulation Results:\n--------------------\n"
        f"Games Simulated: {summary.num_simulations}\n"
        f"Average Rolls to Win: {summary.average_rolls:.2f}\n"
        f"Shortest Game: {shortest}\n"
        "Shortest Roll Sequence: "
        + "".join(f"{roll} " for roll in summary.best_sequence)
        + "\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Run the default simulation on a 10x10 board and print the summary."""
    parser = argparse.ArgumentParser(
        prog="laddersim-walk",
        description="Simulate single-player walks over a 10x10 snakes-and-ladders board.",
    )
    parser.parse_known_args(sys.argv[1:] if argv is None else argv)

    board = create_board(10, 10)
    snakes = [SnakeOrLadder(start, end) for start, end in CLASSIC_SNAKES]
    ladders = [SnakeOrLadder(start, end) for start, end in CLASSIC_LADDERS]
    summary = simulate_games(10000, board, snakes, ladders, 6, 2000, random.Random())
    print(format_summary(summary), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())