"""Loads images once and hands out the cached result by path."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import Any, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]
Loader = Callable[[str], Any]


def _pygame_load(path: str) -> Any:
    import pygame

    surface = pygame.image.load(path)
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


class TextureManager:
    """A cache of loaded textures keyed by file path."""

    def __init__(self, loader: Loader | None = None) -> None:
        self._loader = loader or _pygame_load
        self._textures: dict[str, Any] = {}

    def load(self, path: PathLike) -> Any | None:
        """Return the texture at ``path``, loading it on first use.

        A texture that cannot be loaded gives None and is not cached.
        """
        key = os.fspath(path)
        if key in self._textures:
            return self._textures[key]
        try:
            texture = self._loader(key)
        except (OSError, RuntimeError, ValueError) as err:
            logger.warning("TextureManager: failed to load texture '%s': %s", key, err)
            return None
        if texture is None:
            logger.warning("TextureManager: failed to load texture '%s'", key)
            return None
        self._textures[key] = texture
        logger.info("TextureManager: loaded '%s'", key)
        return texture

    def unload(self, path: PathLike) -> None:
        """Drop the cached texture for ``path`` if there is one."""
        self._textures.pop(os.fspath(path), None)

    def unload_all(self) -> None:
        """Drop every cached texture."""
        self._textures.clear()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return os.fspath(path) in self._textures

    def __len__(self) -> int:
        return len(self._textures)