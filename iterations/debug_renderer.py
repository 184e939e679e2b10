"""Debug-only drawing: text, outlines, translucent boxes and an FPS counter."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

import pygame

from iterations.settings import SettingsManager

logger = logging.getLogger(__name__)

Color = Sequence[int]
FontLoader = Callable[[str, int], Any]

_FALLBACK_FONTS = (
    "C:/Windows/Fonts/consola.ttf",
    "C:/Windows/Fonts/arial.ttf",
    "C:/Windows/Fonts/cour.ttf",
)


def _pygame_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _rect(x: float, y: float, w: float, h: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), round(w), round(h))


class DebugRenderer:
    """Draws debug overlays onto a target surface.

    The font comes from the settings' debug font path, or failing that from
    a list of fallbacks. Without a font, text and the FPS counter are not
    drawn; rectangles are always drawn.
    """

    FONT_SIZE = 14
    FPS_SAMPLE_COUNT = 30
    MAX_CACHED_TEXT_ENTRIES = 256

    def __init__(
        self,
        target: pygame.Surface,
        settings: SettingsManager,
        font_loader: FontLoader | None = None,
    ) -> None:
        self.target = target
        self._settings = settings
        self._fps_samples: deque[float] = deque(maxlen=self.FPS_SAMPLE_COUNT)
        self._text_cache: dict[tuple[str, tuple[int, ...]], pygame.Surface] = {}
        self._font = self._open_font(font_loader or _pygame_font)

    def _open_font(self, loader: FontLoader) -> Any | None:
        primary = self._settings.debug.debug_font_path
        try:
            return loader(primary, self.FONT_SIZE)
        except (OSError, RuntimeError) as err:
            logger.warning(
                "DebugRenderer: could not load font '%s' (%s), trying fallbacks.", primary, err
            )
        for fallback in _FALLBACK_FONTS:
            try:
                font = loader(fallback, self.FONT_SIZE)
            except (OSError, RuntimeError):
                continue
            logger.info("DebugRenderer: using fallback font '%s'.", fallback)
            return font
        logger.warning("DebugRenderer: all fonts failed, debug text unavailable.")
        return None

    @property
    def valid(self) -> bool:
        """Whether a font is loaded and text can be drawn."""
        return self._font is not None

    def draw_text(
        self, x: float, y: float, text: str, color: Color = (255, 255, 0, 255)
    ) -> None:
        """Draw text with its top-left corner at (x, y).

        Rendered text is cached by text and colour; the cache is emptied
        whenever it is full and a new entry is needed.
        """
        if self._font is None:
            return
        key = (text, tuple(color))
        surface = self._text_cache.get(key)
        if surface is None:
            try:
                surface = self._font.render(text, True, color)
            except pygame.error as err:
                logger.warning("DebugRenderer: could not render '%s': %s", text, err)
                return
            if len(self._text_cache) >= self.MAX_CACHED_TEXT_ENTRIES:
                self._text_cache.clear()
            self._text_cache[key] = surface
        self.target.blit(surface, (round(x), round(y)))

    def draw_fps(self, delta_time: float) -> int | None:
        """Draw the frame rate averaged over recent frames.

        Return the frame rate drawn, or None if nothing was drawn.
        """
        if self._font is None:
            return None
        if not self._settings.is_debug_enabled(self._settings.debug.show_fps):
            return None
        self._fps_samples.append(delta_time)
        average = sum(self._fps_samples) / len(self._fps_samples)
        fps = int(1.0 / average) if average > 0.0 else 0
        self.draw_text(8.0, 8.0, f"FPS: {fps}", (255, 255, 0, 255))
        return fps

    def draw_rect(
        self, x: float, y: float, w: float, h: float, color: Color = (255, 0, 255, 255)
    ) -> None:
        """Draw a one-pixel outline of the rectangle."""
        pygame.draw.rect(self.target, color, _rect(x, y, w, h), 1)

    def draw_filled_rect(
        self, x: float, y: float, w: float, h: float, color: Color = (255, 0, 0, 80)
    ) -> None:
        """Fill the rectangle, blending the colour by its alpha."""
        rect = _rect(x, y, w, h)
        if rect.width <= 0 or rect.height <= 0:
            return
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill(color)
        self.target.blit(overlay, rect.topleft)

    def close(self) -> None:
        """Drop the cached text and the font."""
        self._text_cache.clear()
        self._fps_samples.clear()
        self._font = None

    def __enter__(self) -> DebugRenderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()