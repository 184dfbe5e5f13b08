"""Running many games and summarising them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from laddersim.board import Board
from laddersim.game import GameResult, play_game


@dataclass
class SimulationStats:
    """Totals gathered over a batch of games."""

    games: int = 0
    wins: int = 0
    total_rolls: int = 0
    best_game: GameResult | None = None
    snake_usage: list[int] = field(default_factory=list)
    ladder_usage: list[int] = field(default_factory=list)

    def average_rolls(self) -> float:
        """Mean number of rolls over the won games."""
        if not self.wins:
            raise ValueError("no games were won")
        return self.total_rolls / self.wins


def run_simulations(
    board: Board,
    games: int = 10000,
    die_sides: int = 6,
    exact_win: bool = True,
    max_turns: int = 1000,
    rng: random.Random | None = None,
) -> SimulationStats:
    """Play ``games`` games and gather the statistics."""
    stats = SimulationStats(
        games=games,
        snake_usage=[0] * len(board.snakes),
        ladder_usage=[0] * len(board.ladders),
    )
    for _ in range(games):
        result = play_game(board, die_sides, max_turns, exact_win, rng)
        for index, count in result.snake_hits.items():
            stats.snake_usage[index] += count
        for index, count in result.ladder_hits.items():
            stats.ladder_usage[index] += count
        if result.win:
            stats.wins += 1
            stats.total_rolls += result.rolls
            if stats.best_game is None or result.rolls < stats.best_game.rolls:
                stats.best_game = result
    return stats


def format_report(stats: SimulationStats, board: Board) -> str:
    """Render the statistics as a text report."""
    parts = [
        "\n--- Statistics ---\n",
        f"Games run: {stats.games}\n",
        f"Wins: {stats.wins}\n",
    ]
    if stats.wins and stats.best_game is not None:
        best = stats.best_game
        parts.append(f"Average rolls to win: {stats.average_rolls():.2f}\n")
        parts.append(f"Shortest winning rolls: {best.rolls}\nRolls: ")
        parts.append("".join(f"{roll} " for roll in best.path))
        parts.append("\n")

    parts.append("\nSnake usage:\n")
    for snake, count in zip(board.snakes, stats.snake_usage):
        parts.append(f"  {snake.start} -> {snake.end}: {count} times\n")
    parts.append("\nLadder usage:\n")
    for ladder, count in zip(board.ladders, stats.ladder_usage):
        parts.append(f"  {ladder.start} -> {ladder.end}: {count} times\n")
    return "".join(parts)