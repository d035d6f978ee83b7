"""Players: each owns a board, a fleet and a way of choosing shots."""

from __future__ import annotations

import random

from seabattle.field import Field
from seabattle.ship import Point, create_ship
from seabattle.strategy import ManualShotStrategy, RandomShotStrategy, ShotStrategy

FLEET_WEIGHTS = (4, 3, 3, 2, 2, 2, 1, 1, 1, 1)


class Player:
    """A participant with a board and a shot strategy."""

    def __init__(self, strategy: ShotStrategy) -> None:
        self.field = Field()
        self.strategy = strategy

    def create_fleet(self) -> None:
        """Add the standard ten ships to the board, largest first."""
        for weight in FLEET_WEIGHTS:
            self.field.add_ship(create_ship(weight))

    def perform_shot(self, point: Point = (-1, -1)) -> Point:
        """Return the cell this player fires at."""
        return self.strategy.shot(point)


class HumanPlayer(Player):
    """A player who aims by hand."""

    def __init__(self) -> None:
        super().__init__(ManualShotStrategy())


class AIPlayer(Player):
    """A computer player firing at random cells."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(RandomShotStrategy(rng))