# laddersim

Simulate thousands of games of snakes and ladders and see how long a game
really takes, how often a player finishes at all, and which snakes and
ladders get used the most.

The layout used by the commands is the classic one with nine ladders and
ten snakes:

- ladders: 1→38, 4→14, 9→31, 21→42, 28→84, 36→44, 51→67, 71→91, 80→100
- snakes: 16→6, 47→26, 49→11, 56→53, 62→19, 64→60, 87→24, 93→73, 95→75, 98→78

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
laddersim [board_size [games [die_sides [exact_win [max_turns]]]]]
```

All arguments are positional and optional:

| position | meaning                                                                      | default |
|----------|------------------------------------------------------------------------------|---------|
| 1        | number of the last square, which a player must land on to win                | 100     |
| 2        | number of games to simulate                                                  | 10000   |
| 3        | sides on the die                                                             | 6       |
| 4        | `1` to require landing exactly on the last square, `0` to allow overshooting | 1       |
| 5        | rolls allowed per game before it counts as unfinished                        | 1000    |

Each argument is read as a leading integer: text without one counts as
`0`, and extra arguments are ignored. The snakes and ladders stay on the
classic squares whatever the board size. A die with fewer than one side
is rejected with a `ValueError`.

For example, 5000 games with an eight-sided die where overshooting is
allowed:

```
laddersim 100 5000 8 0
```

The program first lists the snakes and ladders, then the settings, then
the number of games run and the number of wins. If any game was won it
also prints the average number of rolls in a winning game and the rolls
of the shortest win. Last comes how many times each snake and each ladder
was taken over all games.

### Graph walk variant

```
laddersim-walk
```

runs 10000 walks with a six-sided die, at most 2000 rolls each, on a
10 × 10 board whose squares are numbered 0 to 99. A player starts on
square 0 and wins by reaching square 99; a roll that would carry past it
is lost. The classic snakes and ladders are applied on these square
numbers, so the ladder from 80 leads to 100, off the board, and a walk
that takes it ends without a win. The report gives the games simulated,
the average rolls to win (rolls of the won walks divided by *all* walks
simulated), and the shortest win with its roll sequence (`none` if no
walk was won). This command takes no settings.

## Library use

```python
import random

from laddersim.board import classic_board
from laddersim.game import play_game
from laddersim.stats import format_report, run_simulations

board = classic_board(100)
rng = random.Random(42)

result = play_game(board, 6, 1000, True, rng)
print(result.win, result.rolls, result.path)

stats = run_simulations(board, 2000, 6, True, 1000, rng)
print(stats.average_rolls())
print(format_report(stats, board))
```

- `laddersim.board.Board(size)` holds snakes and ladders as `Jump`
  values. `add_snake(start, end)` and `add_ladder(start, end)` add them
  (at most 20 of each; further ones are ignored), `resolve_jump(pos)`
  gives the square a token ends on after landing on `pos` (snakes are
  checked before ladders), and `describe()` returns the listing the
  command prints. `classic_board(size)` builds the classic layout.
- `laddersim.game.play_game(...)` returns a `GameResult` with the rolls
  made (`path`, `rolls`), whether the game was won (`win`), and counters
  of which snakes and ladders were taken (`snake_hits`, `ladder_hits`,
  keyed by their index on the board).
- `laddersim.stats.run_simulations(...)` returns `SimulationStats` with
  `games`, `wins`, `total_rolls`, `best_game`, `snake_usage` and
  `ladder_usage`; `average_rolls()` raises `ValueError` when no game was
  won. `format_report(stats, board)` renders the text report.
- `laddersim.graph.create_board(rows, cols, connect_moves)` builds a
  `GraphBoard`; with `connect_moves=True` each square is linked to the
  next six. `add_edge(source, destination)` and `neighbours(node)` work
  on its edges.
- `laddersim.walk` has `play_walk`, `simulate_games` and
  `format_summary`, which the `laddersim-walk` command is built on.

Every function that rolls dice takes a `random.Random` instance, so a
seeded generator makes a run reproducible.

## What it does not do

The package only simulates and reports in text. It has no interactive
game to play, draws no board, and does not save results; the layout
used by the commands cannot be changed from the command line.