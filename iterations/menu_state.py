"""The title menu: choose to start playing or to quit."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from iterations.game_state import GameState
from iterations.gameplay_state import GameplayState
from iterations.input import Scancode
from iterations.ui_renderer import FontLoader, UIRenderer

if TYPE_CHECKING:
    from iterations.game import Game

logger = logging.getLogger(__name__)

MENU_FONT_PATH = "assets/JetBrainsMono-Regular.ttf"
MENU_FONT_SIZE = 32
LINE_HEIGHT = 60
BACKGROUND_COLOR = (10, 10, 20)
ITEM_COLOR = (255, 255, 255, 255)
SELECTED_COLOR = (255, 220, 50, 255)


class MenuState(GameState):
    """A vertical list moved through with Up and Down and chosen with Return."""

    def __init__(
        self, screen_width: int, screen_height: int, font_loader: FontLoader | None = None
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.items: tuple[str, ...] = ("Start", "Quit")
        self.selected_index = 0
        self._font_loader = font_loader
        self._ui: UIRenderer | None = None

    def on_enter(self) -> None:
        super().on_enter()
        logger.info("MenuState: entered.")

    def on_exit(self) -> None:
        super().on_exit()
        logger.info("MenuState: exited.")
        self._ui = None

    def process_input(self, game: Game) -> None:
        keys = game.input
        count = len(self.items)
        if keys.is_key_just_pressed(Scancode.UP):
            self.selected_index = (self.selected_index - 1) % count
        if keys.is_key_just_pressed(Scancode.DOWN):
            self.selected_index = (self.selected_index + 1) % count
        if keys.is_key_just_pressed(Scancode.RETURN):
            choice = self.items[self.selected_index]
            logger.info("MenuState: selected '%s'.", choice)
            if choice == "Start":
                gameplay = GameplayState(self.screen_width, self.screen_height)
                gameplay.init_entities(game)
                gameplay.init_systems(game)
                game.request_push_state(gameplay)
            elif choice == "Quit":
                game.quit()

    def update(self, game: Game, delta_time: float) -> None:
        """The menu has nothing to advance."""

    def render(self, game: Game, interpolation_alpha: float) -> None:
        game.surface.fill(BACKGROUND_COLOR)

        if self._ui is None:
            logger.info("MenuState: initialising UIRenderer.")
            self._ui = UIRenderer(
                game.surface,
                MENU_FONT_PATH,
                MENU_FONT_SIZE,
                self.screen_width,
                font_loader=self._font_loader,
            )
        if not self._ui.valid:
            return

        start_y = int(self.screen_height / 2) - 40
        for index, item in enumerate(self.items):
            color = SELECTED_COLOR if index == self.selected_index else ITEM_COLOR
            self._ui.draw_text_centered(item, start_y + index * LINE_HEIGHT, color)