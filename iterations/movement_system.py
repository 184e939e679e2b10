"""Moves the player from the held movement keys."""

from __future__ import annotations

from iterations.components import PlayerComponent, TransformComponent
from iterations.ecs import System, World
from iterations.input import InputManager, Scancode


class MovementSystem(System):
    """Moves every player at ``speed`` units per second with W, A, S and D.

    The position before the move is kept in the transform's previous fields.
    """

    def __init__(self, input_manager: InputManager, speed: float) -> None:
        self._input = input_manager
        self.speed = speed

    def update(self, world: World, delta_time: float) -> None:
        transforms = world.get_store(TransformComponent)
        step = self.speed * delta_time
        keys = self._input

        for entity in world.view(PlayerComponent, TransformComponent):
            transform = transforms.get(entity)
            transform.prev_x = transform.x
            transform.prev_y = transform.y

            if keys.is_key_down(Scancode.W):
                transform.y -= step
            if keys.is_key_down(Scancode.S):
                transform.y += step
            if keys.is_key_down(Scancode.A):
                transform.x -= step
            if keys.is_key_down(Scancode.D):
                transform.x += step