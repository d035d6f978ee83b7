"""Screen geometry of the two boards and pixel/cell conversions."""

from __future__ import annotations

from seabattle.field import BOARD_SIZE
from seabattle.ship import Point

CELL_SIZE_X = 30.6
CELL_SIZE_Y = 31.6

MYFIELD_X = int(2 * CELL_SIZE_X + 4)
MYFIELD_Y = int(2 * CELL_SIZE_Y + 6)

MYFIELD_HALF_X = int(7 * CELL_SIZE_X + 4)
MYFIELD_HALF_Y = int(7 * CELL_SIZE_Y + 6)

ENEMYFIELD_X = int(15 * CELL_SIZE_X + 4)
ENEMYFIELD_Y = int(2 * CELL_SIZE_Y + 6)

ENEMYFIELD_HALF_X = int(20 * CELL_SIZE_X + 4)
ENEMYFIELD_HALF_Y = int(7 * CELL_SIZE_Y + 6)

FIELD_WIDTH = 306
FIELD_HEIGHT = 316

WINDOW_WIDTH = 830
WINDOW_HEIGHT = 495

OUTSIDE: Point = (-1, -1)


def get_coords(x: int, y: int, field_x: int, field_y: int) -> Point:
    """Convert a pixel position to a board cell; ``(-1, -1)`` when outside.

    The far edge of the board maps to index 10.
    """
    if (
        x < field_x
        or x > field_x + FIELD_WIDTH
        or y < field_y
        or y > field_y + FIELD_HEIGHT
    ):
        return OUTSIDE
    cell_x = FIELD_WIDTH / BOARD_SIZE
    cell_y = FIELD_HEIGHT / BOARD_SIZE
    return int((x - field_x) / cell_x), int((y - field_y) / cell_y)


def cell_origin(
    index: int, field_x: int, field_y: int, half_x: int, half_y: int
) -> Point:
    """Top-left pixel at which the cell with row-major ``index`` is drawn.

    Cells in the top-left quarter are measured from the board origin, all
    others from the centre anchor ``(half_x, half_y)``.
    """
    x = index % BOARD_SIZE
    y = index // BOARD_SIZE
    half = BOARD_SIZE // 2
    if x < half and y < half:
        return int(field_x + x * CELL_SIZE_X), int(field_y + y * CELL_SIZE_Y)
    return int(half_x + (x - half) * CELL_SIZE_X), int(half_y + (y - half) * CELL_SIZE_Y)


def hit_cell(x: float, y: float, field_x: int, field_y: int) -> Point | None:
    """The board cell under a click, or None when the click misses the board."""
    if not (
        field_x <= x <= field_x + FIELD_WIDTH and field_y <= y <= field_y + FIELD_HEIGHT
    ):
        return None
    cx, cy = get_coords(int(x), int(y), field_x, field_y)
    last = BOARD_SIZE - 1
    return min(cx, last), min(cy, last)