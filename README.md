# bugsim

A small artificial-life simulation shown in a borderless 200 × 200 pixel
window.

Green bugs wander the field, stepping along six fixed moves. Each tick a bug
turns by an amount picked at random and weighted by its six-gene *move
genome* (each gene between -4 and 4). Bugs age, spend one unit of energy per
step, and eat any food pellet closer than two units; eating sets the bug's
energy to the pellet's satiety and prints `eaten!`. A bug older than 50
ticks with more than 30 energy gives birth each tick to an offspring with
the same genome and halves its own energy. A bug dies when its energy falls
below zero or it grows older than 500 ticks.

Red angry bugs hunt them. Living green bugs mark the cell beneath them on a
scent map; every tick each cell keeps three eighths of its scent and takes
one eighth from the cells at the next higher x and y, and faint cells are
cleared. An angry bug catches any living green bug within 7 units, taking
over its energy and removing it from the field. Otherwise it turns towards
the strongest scent among the cells to its left, in front and to its right,
when that scent is above its threshold, and falls back on its genome when
nothing draws it. Angry bugs neither eat food nor breed.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
bugsim
```

This opens the window with 15 green bugs, 15 angry bugs and 20 food
pellets. The simulation advances one tick each time you press the **Right
arrow** key. Close the window to quit.

Options:

- `--bugs N` — how many green bugs, and as many angry bugs, to start with (default 15)
- `--food N` — how many food pellets to start with (default 20)
- `--seed N` — seed for the random generator, to repeat a run

## Using it from Python

The simulation can be driven without a window:

```python
import random

from bugsim.game import Game

game = Game(200, 200, random.Random(1))
game.populate(15, 20)
for _ in range(100):
    game.step()

print(len(game.bugs), len(game.angry_bugs), len(game.food))
```

Each `Game.step()` spreads the scent, adds a new food pellet half of the
time, then moves every green bug and every angry bug once.
`Game.draw(surface)` paints the scent, food and living bugs onto any pygame
surface.

The building blocks live in their own modules:

- `bugsim.bug` — `Vec2`, the six `MOVES`, and `Bug`, the grazing bug
- `bugsim.angrybug` — `AngryBug`, the hunter, with `check_smell`,
  `check_vision` and `check_sound` for steering
- `bugsim.food` — `Food`, a pellet with a random satiety from 50 to 549
- `bugsim.smellmap` — `SmellMap`, the scent grid, indexed `grid[x][y]`
- `bugsim.game` — `Game` and the `main` entry point of the `bugsim` command

## What it does not do

Genomes are copied unchanged to offspring; there is no mutation or
crossover. Nothing is saved: there is no way to store or reload a run, and
no statistics or charts are recorded. Angry bugs have `check_vision` and
`check_sound`, but their hunting only steers by scent.