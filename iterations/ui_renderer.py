"""Draws game-facing text, optionally centred across the screen."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

import pygame

logger = logging.getLogger(__name__)

Color = Sequence[int]
FontLoader = Callable[[str, int], Any]


def _pygame_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


class UIRenderer:
    """Renders text with one font onto a target surface.

    If the font cannot be loaded the renderer is invalid and draws nothing.
    """

    def __init__(
        self,
        target: pygame.Surface,
        font_path: str,
        font_size: int,
        screen_width: int,
        font_loader: FontLoader | None = None,
    ) -> None:
        self.target = target
        self.screen_width = screen_width
        loader = font_loader or _pygame_font
        try:
            self._font: Any | None = loader(font_path, font_size)
        except (OSError, RuntimeError) as err:
            logger.warning("UIRenderer: failed to load font '%s': %s", font_path, err)
            self._font = None
        else:
            logger.info("UIRenderer: loaded font '%s' at size %d.", font_path, font_size)

    @property
    def valid(self) -> bool:
        """Whether a font is loaded."""
        return self._font is not None

    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        """Draw text with its top-left corner at (x, y)."""
        if self._font is None:
            return
        try:
            surface = self._font.render(text, True, color)
        except pygame.error as err:
            logger.warning("UIRenderer: could not render '%s': %s", text, err)
            return
        self.target.blit(surface, (x, y))

    def draw_text_centered(self, text: str, y: int, color: Color) -> int | None:
        """Draw text centred horizontally across the screen width at height y.

        Return the x position used, or None if there is no font.
        """
        if self._font is None:
            return None
        width, _ = self._font.size(text)
        x = int((self.screen_width - width) / 2)
        self.draw_text(text, x, y, color)
        return x