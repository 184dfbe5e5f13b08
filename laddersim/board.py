"""Snakes-and-ladders board holding a fixed number of snakes and ladders."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_SIZE = 100
MAX_SNAKES = 20
MAX_LADDERS = 20

CLASSIC_LADDERS = (
    (1, 38), (4, 14), (9, 31), (21, 42), (28, 84),
    (36, 44), (51, 67), (71, 91), (80, 100),
)
CLASSIC_SNAKES = (
    (16, 6), (47, 26), (49, 11), (56, 53), (62, 19),
    (64, 60), (87, 24), (93, 73), (95, 75), (98, 78),
)


@dataclass(frozen=True)
class Jump:
    """A snake or ladder moving a token from ``start`` to ``end``."""

    start: int
    end: int


@dataclass
class Board:
    """A board of ``size`` squares with snakes and ladders."""

    size: int
    snakes: list[Jump] = field(default_factory=list)
    ladders: list[Jump] = field(default_factory=list)

    def add_snake(self, start: int, end: int) -> None:
        """Add a snake; ignored once the board holds MAX_SNAKES snakes."""
        if len(self.snakes) < MAX_SNAKES:
            self.snakes.append(Jump(start, end))

    def add_ladder(self, start: int, end: int) -> None:
        """Add a ladder; ignored once the board holds MAX_LADDERS ladders."""
        if len(self.ladders) < MAX_LADDERS:
            self.ladders.append(Jump(start, end))

    def resolve_jump(self, pos: int) -> int:
        """Return where a token on ``pos`` ends up; snakes are checked first."""
        for jump in (*self.snakes, *self.ladders):
            if jump.start == pos:
                return jump.end
        return pos

    def describe(self) -> str:
        """Return a listing of the board's snakes and ladders."""
        lines = ["Snakes:"]
        lines.extend(f"  {j.start} -> {j.end}" for j in self.snakes)
        lines.append("Ladders:")
        lines.extend(f"  {j.start} -> {j.end}" for j in self.ladders)
        return "\n".join(lines) + "\n"


def classic_board(size: int = MAX_SIZE) -> Board:
    """Return a board with the classic layout of ladders and snakes."""
    board = Board(size)
    for start, end in CLASSIC_LADDERS:
        board.add_ladder(start, end)
    for start, end in CLASSIC_SNAKES:
        board.add_snake(start, end)
    return board