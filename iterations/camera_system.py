"""Keeps the camera centred on the player."""

from __future__ import annotations

import logging

from iterations.components import CameraComponent, PlayerComponent, TransformComponent
from iterations.ecs import System, World

logger = logging.getLogger(__name__)


def single_camera(world: World) -> CameraComponent | None:
    """The camera, if the world holds exactly one; otherwise None."""
    cameras = world.view(CameraComponent)
    if len(cameras) != 1:
        return None
    return world.get_component(cameras[0], CameraComponent)


class CameraSystem(System):
    """Centres the single camera's viewport on the single player.

    Does nothing unless there is exactly one player with a transform and
    exactly one camera; each such problem is logged once until it clears.
    """

    def __init__(self) -> None:
        self._logged_player_count = False
        self._logged_camera_count = False

    def update(self, world: World, delta_time: float) -> None:
        players = world.view(PlayerComponent, TransformComponent)
        if len(players) != 1:
            if not self._logged_player_count:
                logger.warning(
                    "CameraSystem: expected exactly 1 player with transform, found %d.",
                    len(players),
                )
                self._logged_player_count = True
            return
        self._logged_player_count = False

        cameras = world.view(CameraComponent)
        if len(cameras) != 1:
            if not self._logged_camera_count:
                logger.warning("CameraSystem: expected exactly 1 camera, found %d.", len(cameras))
                self._logged_camera_count = True
            return
        self._logged_camera_count = False

        transform = world.get_component(players[0], TransformComponent)
        camera = world.get_component(cameras[0], CameraComponent)
        camera.x = transform.x - camera.viewport_width / 2.0
        camera.y = transform.y - camera.viewport_height / 2.0