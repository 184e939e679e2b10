"""The game window and its drawing surface."""

from __future__ import annotations

import logging

import pygame

from iterations.settings import ScreenMode

logger = logging.getLogger(__name__)


class Window:
    """Opens the display in the chosen screen mode.

    Borderless windows are enlarged to the desktop size. Vertical sync is
    requested when asked for and dropped with a log message if the display
    cannot provide it. Raise pygame.error if the display cannot be opened.
    """

    def __init__(
        self, title: str, width: int, height: int, vsync: bool, screen_mode: ScreenMode
    ) -> None:
        self.screen_mode = screen_mode
        self.vsync = False
        self.surface: pygame.Surface | None = None

        pygame.display.init()
        flags = 0
        size = (width, height)
        if screen_mode is ScreenMode.BORDERLESS:
            flags |= pygame.NOFRAME
            desktops = pygame.display.get_desktop_sizes()
            if desktops:
                size = desktops[0]
        elif screen_mode is ScreenMode.FULLSCREEN:
            flags |= pygame.FULLSCREEN

        try:
            if vsync:
                try:
                    self.surface = pygame.display.set_mode(size, flags | pygame.SCALED, vsync=1)
                    self.vsync = True
                except pygame.error as err:
                    logger.warning("Window: vsync requested but not supported: %s", err)
            if self.surface is None:
                self.surface = pygame.display.set_mode(size, flags)
        except pygame.error:
            logger.error("Window: failed to create window.")
            pygame.display.quit()
            raise

        pygame.display.set_caption(title)
        logger.info("Window: vsync %s.", "enabled" if self.vsync else "disabled")
        logger.info("Window: screen mode '%s'.", screen_mode.value)

    @property
    def valid(self) -> bool:
        """Whether the window is open."""
        return self.surface is not None

    @property
    def size(self) -> tuple[int, int]:
        """Size of the drawing surface; (0, 0) once closed."""
        return self.surface.get_size() if self.surface is not None else (0, 0)

    def close(self) -> None:
        """Close the window and shut the display down; safe to call twice."""
        if self.surface is None:
            return
        self.surface = None
        pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()