import random

import pytest

from seabattle.controller import (
    GameController,
    GameState,
    Outcome,
    can_place_ship,
    check_ship_placement,
    count_ship_cells,
    count_ships,
    is_ship,
    place_ship,
    random_ships_placing,
    sync_ship_cells,
)
from seabattle.field import Cell, Field
from seabattle.player import HumanPlayer
from seabattle.ship import Ship

# Standard fleet laid out on rows 0, 2 and 4 with empty rows in between.
LAYOUT = [
    [(0, 0), (1, 0), (2, 0), (3, 0)],
    [(5, 0), (6, 0), (7, 0)],
    [(0, 2), (1, 2), (2, 2)],
    [(4, 2), (5, 2)],
    [(7, 2), (8, 2)],
    [(0, 4), (1, 4)],
    [(3, 4)],
    [(5, 4)],
    [(7, 4)],
    [(9, 4)],
]


def layout_points(transposed=False):
    points = [p for ship in LAYOUT for p in ship]
    if transposed:
        points = [(y, x) for x, y in points]
    return points


def fill(field, points):
    for point in points:
        field[point] = Cell.SHIP


def ready_controller(transposed=False):
    controller = GameController(random.Random(1))
    fill(controller.bot.field, layout_points(transposed))
    controller.sync_bot_ships()
    fill(controller.player.field, layout_points())
    controller.sync_player_ships()
    controller.game_state = GameState.PLAYER_TURN
    return controller


def test_count_ship_cells_of_layout():
    field = Field()
    fill(field, layout_points())
    assert count_ship_cells(field) == 20


def test_count_ships_by_size():
    field = Field()
    fill(field, layout_points())
    assert [count_ships(field, size) for size in (1, 2, 3, 4)] == [4, 3, 2, 1]


def test_is_ship_vertical():
    field = Field()
    fill(field, [(2, 2), (2, 3), (2, 4)])
    assert is_ship(field, 3, 2, 2)
    assert not is_ship(field, 3, 2, 3)
    assert not is_ship(field, 2, 2, 2)
    assert count_ships(field, 3) == 1


def test_is_ship_rejects_touching_corner():
    field = Field()
    fill(field, [(2, 2), (3, 3)])
    assert not is_ship(field, 1, 2, 2)


def test_check_ship_placement_valid_and_transposed():
    for transposed in (False, True):
        field = Field()
        fill(field, layout_points(transposed))
        assert check_ship_placement(field)


def test_check_ship_placement_too_few_cells():
    field = Field()
    fill(field, layout_points()[:-1])
    assert not check_ship_placement(field)


def test_check_ship_placement_wrong_shapes():
    field = Field()
    points = [p for p in layout_points() if p != (9, 4)] + [(8, 0)]
    fill(field, points)
    assert count_ship_cells(field) == 20
    assert not check_ship_placement(field)


def test_sync_assigns_bows():
    player = HumanPlayer()
    player.create_fleet()
    fill(player.field, layout_points())
    sync_ship_cells(player.field)
    bows = {ship.coords for ship in player.field.fleet}
    assert bows == {ship[0] for ship in LAYOUT}
    for ship in player.field.fleet:
        assert player.field.ship_at(ship.coords) is ship


def test_sync_mismatch_raises():
    player = HumanPlayer()
    player.create_fleet()
    fill(player.field, layout_points()[:4])
    with pytest.raises(ValueError):
        sync_ship_cells(player.field)


def test_can_place_ship_cases():
    field = Field()
    assert can_place_ship(field, Ship(4, (0, 0), True))
    assert not can_place_ship(field, Ship(4, (8, 0), True))
    assert not can_place_ship(field, Ship(3, (0, 8), False))
    place_ship(field, Ship(2, (3, 3), False))
    assert field[(3, 3)] == Cell.SHIP and field[(3, 4)] == Cell.SHIP
    assert not can_place_ship(field, Ship(1, (4, 5), True))
    assert not can_place_ship(field, Ship(1, (3, 3), True))
    assert can_place_ship(field, Ship(1, (5, 5), True))


@pytest.mark.parametrize("seed", range(10))
def test_random_placing_is_valid(seed):
    field = Field()
    field[(0, 0)] = Cell.DOT
    random_ships_placing(field, random.Random(seed))
    assert check_ship_placement(field)
    assert field[(0, 0)] != Cell.DOT


@pytest.mark.parametrize("seed", range(5))
def test_bot_random_ships_placing_binds_fleet(seed):
    controller = GameController(random.Random(seed))
    controller.bot_random_ships_placing()
    assert controller.check_bot_ship_placement()
    fleet = controller.bot.field.fleet
    assert len({ship.coords for ship in fleet}) == len(fleet)
    for ship in fleet:
        assert controller.bot.field[ship.coords] == Cell.SHIP


def test_new_controller_state():
    controller = GameController(random.Random(0))
    assert controller.game_state == GameState.SHIPS_PLACING
    assert len(controller.player.field.fleet) == 10
    assert len(controller.bot.field.fleet) == 10
    assert not controller.check_player_ship_placement()
    assert controller.check_for_game_over() == Outcome.NONE


def test_swap_game_state():
    controller = GameController(random.Random(0))
    controller.swap_game_state()
    assert controller.game_state == GameState.SHIPS_PLACING
    controller.game_state = GameState.PLAYER_TURN
    controller.swap_game_state()
    assert controller.game_state == GameState.ENEMY_TURN
    controller.swap_game_state()
    assert controller.game_state == GameState.PLAYER_TURN


def test_game_over_outcomes():
    controller = ready_controller()
    for ship in controller.bot.field.fleet:
        ship.health = 0
    assert controller.check_for_game_over() == Outcome.PLAYER_WON
    for ship in controller.player.field.fleet:
        ship.health = 0
    assert controller.check_for_game_over() == Outcome.BOT_WON


def test_player_miss_passes_turn():
    controller = ready_controller()
    assert controller.player_shot((9, 9)) == (9, 9)
    assert controller.bot.field[(9, 9)] == Cell.DOT
    assert controller.game_state == GameState.ENEMY_TURN


def test_player_hit_keeps_turn():
    controller = ready_controller()
    controller.player_shot((1, 0))
    assert controller.bot.field[(1, 0)] == Cell.DAMAGED
    four = next(s for s in controller.bot.field.fleet if s.weight == 4)
    assert four.health == 3
    assert controller.game_state == GameState.PLAYER_TURN


def test_shooting_a_dot_changes_nothing():
    controller = ready_controller()
    controller.bot.field[(9, 9)] = Cell.DOT
    before = controller.bot.field.cells
    controller.player_shot((9, 9))
    assert controller.bot.field.cells == before
    assert controller.game_state == GameState.PLAYER_TURN


def test_sinking_horizontal_ship():
    controller = ready_controller()
    for x in range(4):
        controller.player_shot((x, 0))
    field = controller.bot.field
    assert [field[(x, 0)] for x in range(4)] == [Cell.DEAD] * 4
    assert field[(4, 0)] == Cell.DOT
    assert all(field[(x, 1)] == Cell.DOT for x in range(5))
    assert field[(5, 0)] == Cell.SHIP


def test_sinking_vertical_ship():
    controller = ready_controller(transposed=True)
    for y in range(4):
        controller.player_shot((0, y))
    field = controller.bot.field
    assert [field[(0, y)] for y in range(4)] == [Cell.DEAD] * 4
    assert field[(0, 4)] == Cell.DOT
    assert all(field[(1, y)] == Cell.DOT for y in range(5))


def test_sinking_single_deck_ship():
    controller = ready_controller()
    controller.player_shot((3, 4))
    field = controller.bot.field
    assert field[(3, 4)] == Cell.DEAD
    around = [(2, 3), (3, 3), (4, 3), (2, 4), (4, 4), (2, 5), (3, 5), (4, 5)]
    assert all(field[p] == Cell.DOT for p in around)


def test_sinking_whole_fleet_wins():
    controller = ready_controller()
    for point in layout_points():
        controller.player_shot(point)
    assert controller.check_for_game_over() == Outcome.PLAYER_WON
    assert count_ship_cells(controller.bot.field) == 0


def test_bot_shot_miss_on_empty_board():
    controller = GameController(random.Random(3))
    controller.game_state = GameState.ENEMY_TURN
    shot = controller.bot_shot()
    cells = controller.player.field.cells
    assert cells.count(Cell.DOT) == 1
    assert controller.player.field[shot] == Cell.DOT
    assert controller.game_state == GameState.PLAYER_TURN