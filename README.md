# seabattle

A desktop Sea Battle game. You place a fleet on your own 10x10 grid, the
computer places its fleet at random, and then you take turns firing at each
other's grids until one fleet is sunk.

The window is drawn with Tkinter, which must be available in your Python
installation. The package has no other dependencies.

## Playing

Start the game with:

    seabattle

Options:

- `--seed N` — seed the random generator used by the computer, for a
  reproducible game.
- `--delay SECONDS` — pause after each computer shot (default `1.0`).

The window shows two grids: yours on the left, the opponent's on the right.

1. **Place your fleet.** Left-click empty cells on your grid to mark ship
   cells; click a marked cell again to clear it. A complete fleet is 20
   cells: one four-cell ship, two three-cell ships, three two-cell ships and
   four single-cell ships. Ships are straight lines and may not touch each
   other, not even at a corner. No more than 20 cells can be marked.
2. **Start.** Once the placement is valid the status line reads
   "Start - SPACE"; press the space bar to begin. The opponent then places
   its ships at random.
3. **Fire.** Left-click a cell on the opponent's grid. A miss leaves a dot
   and passes the turn; a hit lets you shoot again. When a ship is sunk, its
   cells are marked and the cells around it are dotted. Clicking a cell that
   has already been shot at does nothing.
4. **The opponent** fires at random cells on your grid during its turn and
   keeps firing until it misses.

The game ends when all the ships of one side are sunk, and the status line
announces "You won!" or "You lost!". After that, clicks are ignored.

## Using the game logic

The rules live apart from the window and can be driven from code:

- `seabattle.ship` — `Ship` (weight, bow `coords`, `horizontal`, `health`,
  `damage()`, `is_sunk()`) and `create_ship(weight)` for ships of one to
  four cells.
- `seabattle.field` — `Field`, a 10x10 grid of `Cell` states indexed by
  `(x, y)`, with its fleet, `render()`, `clear()` and `ship_at(point)`.
- `seabattle.strategy` — `ManualShotStrategy` and `RandomShotStrategy`.
- `seabattle.player` — `Player`, `HumanPlayer` and `AIPlayer`.
- `seabattle.controller` — `GameController`, which holds both players, the
  current `GameState` and status `message`, and the shooting rules
  (`player_shot`, `bot_shot`, `check_for_game_over` returning an `Outcome`).
  Board checks are available as functions: `count_ship_cells`, `is_ship`,
  `count_ships`, `check_ship_placement`, `sync_ship_cells`,
  `can_place_ship`, `place_ship` and `random_ships_placing`.
- `seabattle.layout` — conversion between window pixels and grid cells
  (`get_coords`, `hit_cell`, `cell_origin`).
- `seabattle.window` — `GameSession`, the input handling without any
  display (`click`, `press_key`, `drawables`), `MainWindow`, which draws it
  on a Tk canvas, and `main`, the `seabattle` command.

Random choices take a `random.Random` instance, so a game can be made
reproducible by passing a seeded generator to `GameController`:

```python
import random
from seabattle.controller import GameController

controller = GameController(random.Random(42))
```

## What it does not do

- There is no way to start a new game from the window; close it and run
  `seabattle` again.
- Games cannot be saved or resumed.
- The computer opponent does not aim: it picks cells at random, including
  cells it has already shot at.
- Ships are drawn as plain coloured cells; no image files are used.