"""The interactive game: input handling, drawing list and a Tk window."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from seabattle.controller import (
    FLEET_CELLS,
    MSG_PLACE_SHIPS,
    MSG_YOUR_TURN,
    GameController,
    GameState,
    Outcome,
    count_ship_cells,
)
from seabattle.field import Cell
from seabattle.layout import (
    CELL_SIZE_X,
    CELL_SIZE_Y,
    ENEMYFIELD_HALF_X,
    ENEMYFIELD_HALF_Y,
    ENEMYFIELD_X,
    ENEMYFIELD_Y,
    MYFIELD_HALF_X,
    MYFIELD_HALF_Y,
    MYFIELD_X,
    MYFIELD_Y,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    cell_origin,
    hit_cell,
)
from seabattle.ship import Point

log = logging.getLogger(__name__)

MSG_START = "Start - SPACE"
MSG_WON = "You won!"
MSG_LOST = "You lost!"

KEY_SPACE = "space"

PLAYER_SPRITES = {
    Cell.SHIP: "full",
    Cell.DAMAGED: "half_r",
    Cell.DEAD: "full_r",
    Cell.DOT: "dot",
}
BOT_SPRITES = {
    Cell.DOT: "dot",
    Cell.DAMAGED: "half",
    Cell.DEAD: "full",
}


class Button(Enum):
    """Mouse buttons the game reacts to."""

    LEFT = 1
    RIGHT = 3


@dataclass(frozen=True)
class Drawable:
    """A sprite to draw with its top-left corner at ``(x, y)``."""

    x: int
    y: int
    sprite: str


class GameSession:
    """Turns clicks and key presses into game actions."""

    def __init__(self, controller: GameController | None = None) -> None:
        self.controller = controller if controller is not None else GameController()
        self.on_update: Callable[[], None] | None = None

    @property
    def message(self) -> str:
        return self.controller.message

    def _refresh(self) -> None:
        if self.on_update is not None:
            self.on_update()

    def click(self, x: float, y: float, button: Button = Button.LEFT) -> Point | None:
        """Handle a mouse click; return the board cell acted on, if any."""
        if button == Button.RIGHT:
            log.debug("mouse click at (%s, %s)", x, y)
            return None

        state = self.controller.game_state
        if state == GameState.SHIPS_PLACING:
            return self._toggle_ship(x, y)
        if state == GameState.PLAYER_TURN:
            return self._fire(x, y)
        return None

    def _toggle_ship(self, x: float, y: float) -> Point | None:
        cell = hit_cell(x, y, MYFIELD_X, MYFIELD_Y)
        if cell is None:
            return None
        controller = self.controller
        field = controller.player.field
        if field[cell] == Cell.EMPTY:
            if count_ship_cells(field) < FLEET_CELLS:
                field[cell] = Cell.SHIP
                if controller.check_player_ship_placement():
                    controller.message = MSG_START
        else:
            field[cell] = Cell.EMPTY
            controller.message = MSG_PLACE_SHIPS
        return cell

    def _fire(self, x: float, y: float) -> Point | None:
        cell = hit_cell(x, y, ENEMYFIELD_X, ENEMYFIELD_Y)
        if cell is None:
            return None
        controller = self.controller
        controller.player_shot(cell)
        self._refresh()
        self._check_game_over()

        while controller.game_state == GameState.ENEMY_TURN:
            controller.bot_shot()
            self._refresh()
            self._check_game_over()
        return cell

    def _check_game_over(self) -> None:
        outcome = self.controller.check_for_game_over()
        if outcome == Outcome.NONE:
            return
        self.controller.game_state = GameState.GAMEOVER
        self.controller.message = MSG_WON if outcome == Outcome.PLAYER_WON else MSG_LOST

    def press_key(self, key: str) -> bool:
        """Handle a key press; return True when it started the battle."""
        controller = self.controller
        if controller.game_state != GameState.SHIPS_PLACING or key != KEY_SPACE:
            return False
        if not controller.check_player_ship_placement():
            return False
        controller.sync_player_ships()
        controller.bot_random_ships_placing()
        controller.game_state = GameState.PLAYER_TURN
        controller.message = MSG_YOUR_TURN
        return True

    def drawables(self) -> list[Drawable]:
        """Sprites for the current state of both boards.

        The player's ships are shown; on the bot's board only shots are.
        """
        boards = (
            (self.controller.player.field.cells, PLAYER_SPRITES,
             MYFIELD_X, MYFIELD_Y, MYFIELD_HALF_X, MYFIELD_HALF_Y),
            (self.controller.bot.field.cells, BOT_SPRITES,
             ENEMYFIELD_X, ENEMYFIELD_Y, ENEMYFIELD_HALF_X, ENEMYFIELD_HALF_Y),
        )
        result = []
        for cells, sprites, fx, fy, hx, hy in boards:
            for index, cell in enumerate(cells):
                sprite = sprites.get(cell)
                if sprite is not None:
                    x, y = cell_origin(index, fx, fy, hx, hy)
                    result.append(Drawable(x, y, sprite))
        return result


_SPRITE_COLOURS = {
    "full": "#5a6a7a",
    "half": "#e08a2c",
    "half_r": "#e08a2c",
    "full_r": "#c0392b",
}


class MainWindow:
    """A Tk canvas showing both boards and routing input to a session."""

    def __init__(self, root, session: GameSession) -> None:
        import tkinter

        self.root = root
        self.session = session
        root.title("Sea Battle")
        root.resizable(False, False)
        self.canvas = tkinter.Canvas(
            root, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, background="#eef4fb"
        )
        self.canvas.pack()
        self.canvas.bind("<Button-1>", lambda e: self._on_click(e, Button.LEFT))
        self.canvas.bind("<Button-3>", lambda e: self._on_click(e, Button.RIGHT))
        root.bind("<KeyPress>", self._on_key)
        session.on_update = self._refresh
        self.redraw()

    def _on_click(self, event, button: Button) -> None:
        self.session.click(event.x, event.y, button)
        self.redraw()

    def _on_key(self, event) -> None:
        self.session.press_key(event.keysym.lower())
        self.redraw()

    def _refresh(self) -> None:
        self.redraw()
        self.root.update_idletasks()

    def _draw_grid(self, fx: int, fy: int, hx: int, hy: int) -> None:
        for index in range(100):
            x, y = cell_origin(index, fx, fy, hx, hy)
            self.canvas.create_rectangle(
                x, y, x + CELL_SIZE_X, y + CELL_SIZE_Y, outline="#8fb3d9"
            )

    def redraw(self) -> None:
        """Repaint the boards, sprites and status message."""
        canvas = self.canvas
        canvas.delete("all")
        self._draw_grid(MYFIELD_X, MYFIELD_Y, MYFIELD_HALF_X, MYFIELD_HALF_Y)
        self._draw_grid(ENEMYFIELD_X, ENEMYFIELD_Y, ENEMYFIELD_HALF_X, ENEMYFIELD_HALF_Y)
        for item in self.session.drawables():
            if item.sprite == "dot":
                cx = item.x + CELL_SIZE_X / 2
                cy = item.y + CELL_SIZE_Y / 2
                canvas.create_oval(cx - 3, cy - 3, cx + 3, cy + 3, fill="black")
            else:
                canvas.create_rectangle(
                    item.x + 2, item.y + 2,
                    item.x + CELL_SIZE_X - 2, item.y + CELL_SIZE_Y - 2,
                    fill=_SPRITE_COLOURS[item.sprite], outline="",
                )
        canvas.create_rectangle(330, 420, 500, 451, width=3)
        canvas.create_text(415, 435, text=self.session.message, font=("TkDefaultFont", 10, "bold"))


def main(argv: list[str] | None = None) -> int:
    """Open the game window."""
    import tkinter

    parser = argparse.ArgumentParser(prog="seabattle", description="Play sea battle.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the bot")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds after each bot shot")
    args = parser.parse_args(argv)

    controller = GameController(random.Random(args.seed))
    controller.bot_delay = args.delay
    root = tkinter.Tk()
    MainWindow(root, GameSession(controller))
    root.mainloop()
    return 0