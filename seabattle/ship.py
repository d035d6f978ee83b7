"""Ships of the fleet and a factory that builds them by weight."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[int, int]

SHIP_WEIGHTS = (1, 2, 3, 4)


@dataclass
class Ship:
    """A ship of ``weight`` decks whose bow sits at ``coords``.

    ``horizontal`` tells whether the ship extends to the right of the bow
    (True) or downwards from it (False).
    """

    weight: int
    coords: Point = (0, 0)
    horizontal: bool = True
    health: int = field(init=False)

    def __post_init__(self) -> None:
        self.health = self.weight

    def damage(self) -> None:
        """Take one hit."""
        self.health -= 1

    def is_sunk(self) -> bool:
        """Return True once every deck has been hit."""
        return self.health <= 0


def create_ship(weight: int) -> Ship:
    """Build a ship of one to four decks."""
    if weight not in SHIP_WEIGHTS:
        raise ValueError(f"invalid ship weight: {weight!r}")
    return Ship(weight)