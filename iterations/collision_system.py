"""Keeps entities with a hitbox out of blocked and off-map tiles."""

from __future__ import annotations

import logging
import math

from iterations.components import CollisionComponent, TilemapComponent, TransformComponent
from iterations.ecs import System, World

logger = logging.getLogger(__name__)


def _tile_floor(coordinate: float, tile_size: int) -> int:
    return math.floor(coordinate / tile_size)


def overlaps_non_walkable(
    x: float, y: float, width: float, height: float, tilemap: TilemapComponent
) -> bool:
    """Whether the box at (x, y) touches a blocked tile or lies partly off the map.

    The box covers pixels from x to x + width - 1 and y to y + height - 1.
    """
    left = _tile_floor(x, tilemap.tile_width)
    right = _tile_floor(x + width - 1.0, tilemap.tile_width)
    top = _tile_floor(y, tilemap.tile_height)
    bottom = _tile_floor(y + height - 1.0, tilemap.tile_height)

    rows = tilemap.rows
    columns = tilemap.columns
    for row in range(top, bottom + 1):
        for col in range(left, right + 1):
            if not (0 <= row < rows and 0 <= col < columns):
                return True
            if row * columns + col in tilemap.blocked_tiles:
                return True
    return False


class CollisionSystem(System):
    """Moves colliding entities back towards their previous position.

    Reverting only the vertical move is tried first, then only the
    horizontal one, so entities slide along walls; if neither clears the
    hitbox both axes are reverted.
    """

    def __init__(self) -> None:
        self._logged_ragged_rows = False

    def update(self, world: World, delta_time: float) -> None:
        tilemap = next((tm for _, tm in world.get_store(TilemapComponent).items()), None)
        if tilemap is None or not tilemap.grid or not tilemap.grid[0]:
            return

        columns = tilemap.columns
        if any(len(row) != columns for row in tilemap.grid):
            if not self._logged_ragged_rows:
                logger.warning("CollisionSystem: tilemap has ragged rows; collision skipped.")
                self._logged_ragged_rows = True
            return
        self._logged_ragged_rows = False

        collisions = world.get_store(CollisionComponent)
        transforms = world.get_store(TransformComponent)
        for entity in world.view(CollisionComponent, TransformComponent):
            self._resolve(collisions.get(entity), transforms.get(entity), tilemap)

    @staticmethod
    def _resolve(
        box: CollisionComponent, transform: TransformComponent, tilemap: TilemapComponent
    ) -> None:
        def left(x: float) -> float:
            return x - box.width / 2.0 + box.offset_x

        def top(y: float) -> float:
            return y - box.height / 2.0 + box.offset_y

        def blocked(x: float, y: float) -> bool:
            return overlaps_non_walkable(left(x), top(y), box.width, box.height, tilemap)

        if not blocked(transform.x, transform.y):
            return
        if not blocked(transform.x, transform.prev_y):
            transform.y = transform.prev_y
        elif not blocked(transform.prev_x, transform.y):
            transform.x = transform.prev_x
        else:
            transform.x = transform.prev_x
            transform.y = transform.prev_y