"""The pause screen: a dimmed view of the game until Escape is pressed again."""

from __future__ import annotations

import logging
from typing import Any

import pygame

from iterations.game_state import GameState
from iterations.input import Scancode

logger = logging.getLogger(__name__)

OVERLAY_COLOR = (0, 0, 0, 160)


class PausedState(GameState):
    """Freezes the game, draws it dimmed and resumes on Escape."""

    def on_enter(self) -> None:
        super().on_enter()
        logger.info("Game paused.")

    def on_exit(self) -> None:
        super().on_exit()
        logger.info("Game resumed.")

    def process_input(self, game: Any) -> None:
        if game.input.is_key_just_pressed(Scancode.ESCAPE):
            game.request_pop_state()

    def update(self, game: Any, delta_time: float) -> None:
        """Nothing moves while paused."""

    def render(self, game: Any, interpolation_alpha: float) -> None:
        below = game.state_below()
        if below is not None:
            below.draw_scene(game, interpolation_alpha)

        overlay = pygame.Surface((game.window_width, game.window_height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        game.surface.blit(overlay, (0, 0))