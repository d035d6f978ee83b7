"""Strategies that choose where a player fires."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from seabattle.ship import Point

BOARD_SIZE = 10


class ShotStrategy(ABC):
    """Picks the cell a shot lands on."""

    @abstractmethod
    def shot(self, point: Point = (0, 0)) -> Point:
        """Return the target cell."""


class ManualShotStrategy(ShotStrategy):
    """Fires exactly where the player aimed."""

    def shot(self, point: Point = (0, 0)) -> Point:
        return point


class RandomShotStrategy(ShotStrategy):
    """Fires at a random cell of the board, ignoring the given point."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def shot(self, point: Point = (0, 0)) -> Point:
        return (self.rng.randrange(BOARD_SIZE), self.rng.randrange(BOARD_SIZE))