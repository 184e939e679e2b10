"""Draws coloured boxes and sprites relative to the camera."""

from __future__ import annotations

import logging

import pygame

from iterations.camera_system import single_camera
from iterations.components import (
    CameraComponent,
    RenderComponent,
    SpriteComponent,
    TransformComponent,
)
from iterations.ecs import System, World

logger = logging.getLogger(__name__)


def _rect(x: float, y: float, w: float, h: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), round(w), round(h))


class RenderSystem(System):
    """Draws every box and every sprite with a transform onto the target.

    Boxes are drawn first, then sprites. Without exactly one camera the
    world origin is used, and the problem is logged once until it clears.
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
                "RenderSystem: expected exactly 1 camera, found %d. "
                "Using world-origin fallback camera.",
                len(world.view(CameraComponent)),
            )
            self._logged_camera_count = True
        return 0.0, 0.0

    def update(self, world: World, delta_time: float) -> None:
        camera_x, camera_y = self._camera_origin(world)
        transforms = world.get_store(TransformComponent)
        renders = world.get_store(RenderComponent)
        sprites = world.get_store(SpriteComponent)

        for entity in world.view(RenderComponent, TransformComponent):
            box = renders.get(entity)
            transform = transforms.get(entity)
            dst = _rect(
                transform.x - box.width / 2.0 - camera_x,
                transform.y - box.height / 2.0 - camera_y,
                box.width,
                box.height,
            )
            self.target.fill((box.r, box.g, box.b), dst)

        for entity in world.view(SpriteComponent, TransformComponent):
            sprite = sprites.get(entity)
            if sprite.texture is None:
                continue
            transform = transforms.get(entity)
            src = sprite.src_rect
            if src is not None:
                w, h = src.w, src.h
                area = _rect(src.x, src.y, src.w, src.h)
            else:
                w, h = sprite.texture.get_size()
                area = None
            dst = _rect(
                transform.x - w / 2.0 + sprite.offset_x - camera_x,
                transform.y - h / 2.0 + sprite.offset_y - camera_y,
                w,
                h,
            )
            self.target.blit(sprite.texture, dst.topleft, area)