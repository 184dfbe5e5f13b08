"""Board modelled as a graph of squares joined by directed edges."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

MAX_EDGES = 6


@dataclass
class GraphBoard:
    """A ``rows`` by ``cols`` board whose squares are numbered from 0."""

    rows: int
    cols: int
    _edges: list[deque[int]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(
                f"a board needs at least one row and one column, got {self.rows}x{self.cols}"
            )
        self._edges = [deque() for _ in range(self.size)]

    @property
    def size(self) -> int:
        """Total number of squares."""
        return self.rows * self.cols

    def _check(self, node: int) -> None:
        if not 0 <= node < self.size:
            raise IndexError(f"square {node} is not on a board of {self.size} squares")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an edge from ``source`` to ``destination``."""
        self._check(source)
        self._edges[source].appendleft(destination)

    def neighbours(self, node: int) -> list[int]:
        """Destinations reachable from ``node``, most recently added first."""
        self._check(node)
        return list(self._edges[node])


def create_board(rows: int, cols: int, connect_moves: bool = False) -> GraphBoard:
    """Create a board; with ``connect_moves`` each square links to the next six."""
    board = GraphBoard(rows, cols)
    if connect_moves:
        for square in range(board.size):
            for step in range(1, MAX_EDGES + 1):
                if square + step >= board.size:
                    break
                board.add_edge(square, square + step)
    return board