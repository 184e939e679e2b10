"""Draws debug overlays for hitboxes, sprite bounds, the tile grid and blocked tiles."""

from __future__ import annotations

import logging
import math
from typing import Any

from iterations.camera_system import single_camera
from iterations.components import (
    CameraComponent,
    CollisionComponent,
    SpriteComponent,
    TilemapComponent,
    TransformComponent,
)
from iterations.ecs import System, World
from iterations.settings import SettingsManager

logger = logging.getLogger(__name__)

HITBOX_COLOR = (0, 255, 0, 255)
SPRITE_BOUNDS_COLOR = (255, 0, 255, 255)
BLOCKED_TILE_COLOR = (255, 0, 0, 80)
GRID_COLOR = (255, 255, 255, 40)


class DebugRenderSystem(System):
    """Hands every debug overlay the settings allow to a debug renderer.

    Meant to run last among the render systems so its drawing sits on top.
    Without exactly one camera the world origin is used and the whole tile
    map is drawn; the problem is logged once until it clears.
    """

    def __init__(self, debug_renderer: Any, settings: SettingsManager) -> None:
        self._debug = debug_renderer
        self._settings = settings
        self._logged_camera_count = False
        self._logged_ragged_rows = False

    def update(self, world: World, delta_time: float) -> None:
        camera = single_camera(world)
        if camera is not None:
            self._logged_camera_count = False
        elif not self._logged_camera_count:
            logger.warning(
                "DebugRenderSystem: expected exactly 1 camera, found %d. "
                "Using world-origin fallback camera.",
                len(world.view(CameraComponent)),
            )
            self._logged_camera_count = True

        cam_x, cam_y = (camera.x, camera.y) if camera is not None else (0.0, 0.0)
        enabled = self._settings.is_debug_enabled
        flags = self._settings.debug

        if enabled(flags.show_collision):
            self._draw_hitboxes(world, cam_x, cam_y)
        if enabled(flags.sprite_bounds):
            self._draw_sprite_bounds(world, cam_x, cam_y)
        show_grid = enabled(flags.show_tile_grid)
        show_walkability = enabled(flags.show_walkability)
        if show_grid or show_walkability:
            for _, tilemap in world.get_store(TilemapComponent).items():
                self._draw_tiles(tilemap, camera, show_grid, show_walkability)

    def _draw_hitboxes(self, world: World, cam_x: float, cam_y: float) -> None:
        transforms = world.get_store(TransformComponent)
        for entity, box in world.get_store(CollisionComponent).items():
            transform = transforms.try_get(entity)
            if transform is None:
                continue
            self._debug.draw_rect(
                transform.x - box.width / 2.0 + box.offset_x - cam_x,
                transform.y - box.height / 2.0 + box.offset_y - cam_y,
                box.width,
                box.height,
                HITBOX_COLOR,
            )

    def _draw_sprite_bounds(self, world: World, cam_x: float, cam_y: float) -> None:
        transforms = world.get_store(TransformComponent)
        for entity, sprite in world.get_store(SpriteComponent).items():
            transform = transforms.try_get(entity)
            if transform is None or sprite.texture is None:
                continue
            if sprite.src_rect is not None:
                w, h = sprite.src_rect.w, sprite.src_rect.h
            else:
                w, h = sprite.texture.get_size()
            self._debug.draw_rect(
                transform.x - w / 2.0 + sprite.offset_x - cam_x,
                transform.y - h / 2.0 + sprite.offset_y - cam_y,
                w,
                h,
                SPRITE_BOUNDS_COLOR,
            )

    def _draw_tiles(
        self,
        tilemap: TilemapComponent,
        camera: CameraComponent | None,
        show_grid: bool,
        show_walkability: bool,
    ) -> None:
        rows = tilemap.rows
        columns = tilemap.columns
        if rows <= 0 or columns <= 0:
            return
        if any(len(row) != columns for row in tilemap.grid):
            if not self._logged_ragged_rows:
                logger.warning(
                    "DebugRenderSystem: tilemap has ragged rows; tile debug overlays skipped."
                )
                self._logged_ragged_rows = True
            return
        self._logged_ragged_rows = False

        tw, th = tilemap.tile_width, tilemap.tile_height
        row_range = range(rows)
        col_range = range(columns)
        if camera is not None and tw > 0 and th > 0:
            first_col = max(0, math.floor(camera.x / tw))
            last_col = min(columns - 1, math.floor((camera.x + camera.viewport_width - 1.0) / tw))
            first_row = max(0, math.floor(camera.y / th))
            last_row = min(rows - 1, math.floor((camera.y + camera.viewport_height - 1.0) / th))
            if first_col > last_col or first_row > last_row:
                return
            row_range = range(first_row, last_row + 1)
            col_range = range(first_col, last_col + 1)

        cam_x, cam_y = (camera.x, camera.y) if camera is not None else (0.0, 0.0)
        for row in row_range:
            for col in col_range:
                x = float(col * tw) - cam_x
                y = float(row * th) - cam_y
                if show_walkability and tilemap.is_blocked(row, col):
                    self._debug.draw_filled_rect(x, y, float(tw), float(th), BLOCKED_TILE_COLOR)
                if show_grid:
                    self._debug.draw_rect(x, y, float(tw), float(th), GRID_COLOR)