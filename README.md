# sharkboard

A small dice-and-coins board game for the terminal, in which a shark chases
the players round a circular board.

## How the game works

- The board has 20 squares. When a board is set up, coins worth 1 to 4 are
  dropped 12 times on random squares. A square hit twice keeps the last drop.
- The current player rolls a six-sided die, moves forward and wraps round the
  end of the board. They pick up any coins on the square where they land.
- After every roll the shark moves 1 to 6 squares. It starts 4 squares behind
  the first square and wraps round the board too. If it stops on the current
  player's square, that player is caught.
- A player keeps the die until the shark catches them. Then the turn passes to
  the next player who is still alive.
- The game ends when no player is left alive. The closing line gives the
  number of living players and the winner, which is the living player with the
  most coins. When every player has been caught this reads "nobody".

## Installation

```
pip install .
```

## Playing

```
sharkboard
```

Run without arguments, the command asks for three player names and keeps the
first word of each. Names can also be given on the command line, and
`--seed` makes the game repeatable:

```
sharkboard Ana Bo Cy --seed 7
```

Before every roll the board, each player's position, coins, status and track
are shown. Press Enter to roll.

## Using it as a library

```python
import random

from sharkboard.game import SharkGame

game = SharkGame(["Ana", "Bo", "Cy"], random.Random(7))
while not game.is_over():
    result = game.play_turn()
    print(result.player.name, result.roll, result.coins, result.caught)
print(game.status_report())
```

- `sharkboard.board.Board` holds the squares, their `BoardStatus`, the coins
  and the shark. Its methods are `reset()`, `status(pos)`, `take_coin(pos)`,
  `step_shark()` and `render()`.
- `sharkboard.game` provides `SharkGame`, with `play_turn()`, `is_over()`,
  `alive_count()`, `winner()`, `check_die()`, `status_report()` and
  `player_track(player)`. It also provides `Player`, `PlayerStatus`,
  `roll_die(rng)`, `opening()` and `main(argv)`.
- `sharkboard.basics` holds helpers for C-style integer arithmetic, leap
  years, bitwise results, digit counting, a small calculator, factorial and
  combination, and a `GuessingGame`.
- `sharkboard.records` holds helpers for arrays and matrices, writing and
  reading word files, and `Point`, `Student`, `ScoreRecord` and
  `score_summary`.

## What it does not do

- Games are not saved. Nothing is kept between runs.
- Every square starts as `BoardStatus.OK`, and no part of the package marks a
  square destroyed. `SharkGame.check_die()` removes players who stand on a
  destroyed square, but the game loop never calls it.

## Running the tests

```
pip install .[test]
pytest
```