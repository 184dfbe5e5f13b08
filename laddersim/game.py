"""Playing a single game of snakes and ladders."""

from __future__ import annotations

import random
from collections import Counter
from dataclasses import dataclass, field

from laddersim.board import Board


@dataclass
class GameResult:
    """Outcome of one game: the rolls made and the jumps taken."""

    path: list[int] = field(default_factory=list)
    win: bool = False
    snake_hits: Counter = field(default_factory=Counter)
    ladder_hits: Counter = field(default_factory=Counter)

    @property
    def rolls(self) -> int:
        """Number of rolls made."""
        return len(self.path)


def roll_die(sides: int, rng: random.Random | None = None) -> int:
    """Roll a die with ``sides`` faces, returning 1..sides."""
    if sides < 1:
        raise ValueError(f"a die needs at least one side, got {sides}")
    return (rng or random).randint(1, sides)


def play_game(
    board: Board,
    die_sides: int = 6,
    max_turns: int = 1000,
    exact_win: bool = True,
    rng: random.Random | None = None,
) -> GameResult:
    """Play one game for at most ``max_turns`` rolls.

    With ``exact_win`` a roll that would pass the last square is forfeited.
    The game is won on landing exactly on square ``board.size``.
    """
    result = GameResult()
    pos = 0
    for _ in range(max_turns):
        roll = roll_die(die_sides, rng)
        if pos + roll <= board.size or not exact_win:
            pos += roll

        old_pos = pos
        pos = board.resolve_jump(pos)

        if old_pos != pos:
            for index, snake in enumerate(board.snakes):
                if snake.start == old_pos and snake.end == pos:
                    result.snake_hits[index] += 1
            for index, ladder in enumerate(board.ladders):
                if ladder.start == old_pos and ladder.end == pos:
                    result.ladder_hits[index] += 1

        result.path.append(roll)
        if pos == board.size:
            result.win = True
            break
    return result