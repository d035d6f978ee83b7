"""The 10x10 game board and the fleet placed on it."""

from __future__ import annotations

from enum import IntEnum

from seabattle.ship import Point, Ship

BOARD_SIZE = 10


class Cell(IntEnum):
    """State of a board cell."""

    EMPTY = 0
    DOT = 1
    SHIP = 2
    DEAD = 3
    DAMAGED = 4


def _on_board(point: Point) -> bool:
    x, y = point
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class Field:
    """A board of cells indexed by ``(x, y)`` plus the ships it holds.

    Reading outside the board yields ``Cell.EMPTY``; writing outside it
    is ignored.
    """

    def __init__(self) -> None:
        self._cells = [Cell.EMPTY] * (BOARD_SIZE * BOARD_SIZE)
        self._fleet: list[Ship] = []

    def add_ship(self, ship: Ship) -> None:
        self._fleet.append(ship)

    def __getitem__(self, point: Point) -> Cell:
        if not _on_board(point):
            return Cell.EMPTY
        x, y = point
        return self._cells[x + BOARD_SIZE * y]

    def __setitem__(self, point: Point, state: Cell) -> None:
        if _on_board(point):
            x, y = point
            self._cells[x + BOARD_SIZE * y] = Cell(state)

    @property
    def cells(self) -> list[Cell]:
        """A copy of all cells, row by row."""
        return list(self._cells)

    @property
    def fleet(self) -> list[Ship]:
        """The ships on this board, in the order they were added."""
        return list(self._fleet)

    def render(self) -> str:
        """The board as rows of cell numbers."""
        rows = (
            self._cells[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        )
        return "\n".join(" ".join(str(int(cell)) for cell in row) for row in rows)

    def describe_fleet(self) -> list[str]:
        """One line per ship giving its weight and bow position."""
        return [f"w: {ship.weight}, {ship.coords}" for ship in self._fleet]

    def clear(self) -> None:
        """Reset every cell to empty; the fleet is kept."""
        self._cells = [Cell.EMPTY] * (BOARD_SIZE * BOARD_SIZE)

    def _ship_with_bow(self, point: Point) -> Ship | None:
        return next((ship for ship in self._fleet if ship.coords == point), None)

    def ship_at(self, point: Point) -> Ship:
        """Return the ship occupying the intact ship cell ``point``.

        The bow is searched for to the left when the left neighbour is part
        of a ship, otherwise upwards.
        """
        if self[point] != Cell.SHIP:
            raise ValueError(f"cell {point} holds no ship")

        ship = self._ship_with_bow(point)
        if ship is not None:
            return ship

        x, y = point
        if self[(x - 1, y)] in (Cell.SHIP, Cell.DAMAGED):
            step = (-1, 0)
        else:
            step = (0, -1)

        while x >= 0 and y >= 0:
            x, y = x + step[0], y + step[1]
            ship = self._ship_with_bow((x, y))
            if ship is not None:
                return ship
        raise LookupError(f"no ship found for cell {point}")