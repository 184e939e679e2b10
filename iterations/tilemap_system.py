"""Draws tile maps from their tileset relative to the camera."""

from __future__ import annotations

import logging

import pygame

from iterations.camera_system import single_camera
from iterations.components import CameraComponent, TilemapComponent
from iterations.ecs import System, World

logger = logging.getLogger(__name__)


class TilemapSystem(System):
    """Draws every tile of every tile map that has a tileset.

    A tile's id picks its image from the tileset, read left to right and
    top to bottom in ``tileset_columns`` columns; negative ids are skipped.
    Without exactly one camera the world origin is used, and the problem is
    logged once until it clears.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self._logged_camera_count = False

    def _camera_origin(self, world: World) -> tuple[float, float]:
        camera = single_camera(world)
        if camera is not None:
            self._logged_camera_count = False
            return camera.x, camera.y
        if not self._logged_camera_count:
            logger.warning(
                "TilemapSystem: expected exactly 1 camera, found %d. "
                "Using world-origin fallback camera.",
                len(world.view(CameraComponent)),
            )
            self._logged_camera_count = True
        return 0.0, 0.0

    def update(self, world: World, delta_time: float) -> None:
        camera_x, camera_y = self._camera_origin(world)

        for _, tilemap in world.get_store(TilemapComponent).items():
            if tilemap.tileset is None or tilemap.tileset_columns <= 0:
                continue
            tw, th = tilemap.tile_width, tilemap.tile_height
            for row, tiles in enumerate(tilemap.grid):
                for col, tile in enumerate(tiles):
                    if tile.id < 0:
                        continue
                    src_row, src_col = divmod(tile.id, tilemap.tileset_columns)
                    area = pygame.Rect(src_col * tw, src_row * th, tw, th)
                    dst = (round(col * tw - camera_x), round(row * th - camera_y))
                    self.target.blit(tilemap.tileset, dst, area)