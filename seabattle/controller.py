"""Game rules: fleet validation, random placement, shots and turn order."""

from __future__ import annotations

import logging
import random
import time
from enum import Enum, IntEnum

from seabattle.field import BOARD_SIZE, Cell, Field
from seabattle.player import FLEET_WEIGHTS, AIPlayer, HumanPlayer, Player
from seabattle.ship import Point, Ship

log = logging.getLogger(__name__)

FLEET_CELLS = sum(FLEET_WEIGHTS)
SHIPS_PER_WEIGHT = {weight: FLEET_WEIGHTS.count(weight) for weight in set(FLEET_WEIGHTS)}

MSG_PLACE_SHIPS = "Place your ships!"
MSG_BOT_TURN = "Bot's turn!"
MSG_YOUR_TURN = "Your turn!"


class GameState(Enum):
    """Phase of the game."""

    SHIPS_PLACING = 0
    PLAYER_TURN = 1
    ENEMY_TURN = 2
    GAMEOVER = 3


class Outcome(IntEnum):
    """Result of a game-over check."""

    NONE = 0
    BOT_WON = 1
    PLAYER_WON = 2


def _board_points():
    """All board cells in row-major order."""
    return ((x, y) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE))


def count_ship_cells(field: Field) -> int:
    """Number of intact ship cells on the board."""
    return sum(1 for point in _board_points() if field[point] == Cell.SHIP)


def _run_length(field: Field, x: int, y: int, dx: int, dy: int) -> int:
    length = 0
    while field[(x, y)] != Cell.EMPTY and x < BOARD_SIZE and y < BOARD_SIZE:
        x, y = x + dx, y + dy
        length += 1
    return length


def is_ship(field: Field, size: int, x: int, y: int) -> bool:
    """Tell whether a separate ship of ``size`` decks has its bow at ``(x, y)``."""
    empty = Cell.EMPTY
    if x > 0 and field[(x - 1, y)] != empty:
        return False
    if y > 0 and field[(x, y - 1)] != empty:
        return False
    if field[(x, y)] == empty:
        return False

    if _run_length(field, x, y, 1, 0) == size:
        if field[(x, y + 1)] != empty:
            return False
        corners = ((x - 1, y - 1), (x - 1, y + 1), (x + size, y - 1), (x + size, y + 1))
        return all(field[corner] == empty for corner in corners)

    if _run_length(field, x, y, 0, 1) == size:
        if field[(x + 1, y)] != empty:
            return False
        corners = ((x - 1, y - 1), (x + 1, y - 1), (x - 1, y + size), (x + 1, y + size))
        return all(field[corner] == empty for corner in corners)

    return False


def count_ships(field: Field, size: int) -> int:
    """Number of separate ships of ``size`` decks on the board."""
    return sum(1 for x, y in _board_points() if is_ship(field, size, x, y))


def check_ship_placement(field: Field) -> bool:
    """Tell whether the board holds exactly the standard fleet, correctly spaced."""
    if count_ship_cells(field) != FLEET_CELLS:
        return False
    return all(
        count_ships(field, weight) == number
        for weight, number in sorted(SHIPS_PER_WEIGHT.items())
    )


def sync_ship_cells(field: Field) -> None:
    """Give each ship of the fleet the bow position of a ship drawn on the board.

    Bows are taken in row-major order and handed to the ships of matching
    weight in fleet order.
    """
    fleet = field.fleet
    for weight in sorted({ship.weight for ship in fleet}):
        ships = [ship for ship in fleet if ship.weight == weight]
        bows = [(x, y) for x, y in _board_points() if is_ship(field, weight, x, y)]
        if len(bows) != len(ships):
            raise ValueError(
                f"board has {len(bows)} ships of weight {weight}, fleet has {len(ships)}"
            )
        for ship, (x, y) in zip(ships, bows):
            ship.coords = (x, y)
            ship.horizontal = weight == 1 or field[(x + 1, y)] != Cell.EMPTY
    for line in field.describe_fleet():
        log.debug(line)


def _ship_points(ship: Ship) -> list[Point]:
    x, y = ship.coords
    if ship.horizontal:
        return [(x + i, y) for i in range(ship.weight)]
    return [(x, y + i) for i in range(ship.weight)]


def can_place_ship(field: Field, ship: Ship) -> bool:
    """Tell whether ``ship`` fits on free cells without touching another ship."""
    for px, py in _ship_points(ship):
        if px >= BOARD_SIZE or py >= BOARD_SIZE or field[(px, py)] != Cell.EMPTY:
            return False
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if field[(px + dx, py + dy)] == Cell.SHIP:
                    return False
    return True


def place_ship(field: Field, ship: Ship) -> None:
    """Mark the cells of ``ship`` as ship cells."""
    for point in _ship_points(ship):
        field[point] = Cell.SHIP


def random_ships_placing(field: Field, rng: random.Random) -> None:
    """Clear the board and draw the standard fleet at random positions."""
    field.clear()
    for weight in FLEET_WEIGHTS:
        while True:
            x = rng.randrange(BOARD_SIZE)
            y = rng.randrange(BOARD_SIZE)
            horizontal = rng.randrange(2) == 1
            candidate = Ship(weight, (x, y), horizontal)
            if can_place_ship(field, candidate):
                place_ship(field, candidate)
                break


class GameController:
    """Holds both players and runs the game between them."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.game_state = GameState.SHIPS_PLACING
        self.player: Player = HumanPlayer()
        self.bot: Player = AIPlayer(self.rng)
        self.message = MSG_PLACE_SHIPS
        self.bot_delay = 0.0
        self.create_fleets()

    def create_fleets(self) -> None:
        """Give both players the standard fleet."""
        self.player.create_fleet()
        self.bot.create_fleet()

    def check_player_ship_placement(self) -> bool:
        return check_ship_placement(self.player.field)

    def check_bot_ship_placement(self) -> bool:
        return check_ship_placement(self.bot.field)

    def check_for_game_over(self) -> Outcome:
        """Report which side, if any, has lost its whole fleet."""
        player_health = sum(ship.health for ship in self.player.field.fleet)
        if player_health == 0:
            return Outcome.BOT_WON
        bot_health = sum(ship.health for ship in self.bot.field.fleet)
        if bot_health == 0:
            return Outcome.PLAYER_WON
        log.debug("player health: %d, bot health: %d", player_health, bot_health)
        return Outcome.NONE

    def swap_game_state(self) -> None:
        """Pass the turn to the other side; other phases are left alone."""
        if self.game_state == GameState.ENEMY_TURN:
            self.game_state = GameState.PLAYER_TURN
        elif self.game_state == GameState.PLAYER_TURN:
            self.game_state = GameState.ENEMY_TURN

    def take_shot(self, shooter: Player, target: Player, point: Point) -> Point:
        """Fire at ``target``'s board and return the cell that was hit.

        A miss leaves a dot and passes the turn; a hit damages the ship and,
        once it sinks, marks it dead and dots the cells around it.
        """
        field = target.field
        shot = shooter.perform_shot(point)
        state = field[shot]

        if state == Cell.EMPTY:
            field[shot] = Cell.DOT
            self.swap_game_state()
            self.message = (
                MSG_BOT_TURN if self.game_state == GameState.ENEMY_TURN else MSG_YOUR_TURN
            )
        elif state == Cell.SHIP:
            ship = field.ship_at(shot)
            ship.damage()
            field[shot] = Cell.DAMAGED
            if ship.health == 0:
                self._sink(field, ship)
        return shot

    @staticmethod
    def _sink(field: Field, ship: Ship) -> None:
        bx, by = ship.coords
        weight = ship.weight
        if field[(bx + 1, by)] == Cell.DAMAGED or weight == 1:
            for i in range(weight):
                field[(bx + i, by)] = Cell.DEAD
            for i in range(-1, weight + 1):
                field[(bx + i, by + 1)] = Cell.DOT
                field[(bx + i, by - 1)] = Cell.DOT
            field[(bx - 1, by)] = Cell.DOT
            field[(bx + weight, by)] = Cell.DOT
        else:
            for i in range(weight):
                field[(bx, by + i)] = Cell.DEAD
            for i in range(-1, weight + 1):
                field[(bx + 1, by + i)] = Cell.DOT
                field[(bx - 1, by + i)] = Cell.DOT
            field[(bx, by - 1)] = Cell.DOT
            field[(bx, by + weight)] = Cell.DOT
        log.debug("sank a %d-decker", weight)

    def player_shot(self, point: Point) -> Point:
        """The human fires at the bot's board."""
        return self.take_shot(self.player, self.bot, point)

    def bot_shot(self) -> Point:
        """The bot fires at the human's board."""
        shot = self.take_shot(self.bot, self.player, (-1, -1))
        if self.bot_delay > 0:
            time.sleep(self.bot_delay)
        return shot

    def bot_random_ships_placing(self) -> None:
        """Draw the bot's fleet at random and bind its ships to the board."""
        random_ships_placing(self.bot.field, self.rng)
        self.sync_bot_ships()

    def sync_player_ships(self) -> None:
        sync_ship_cells(self.player.field)

    def sync_bot_ships(self) -> None:
        sync_ship_cells(self.bot.field)