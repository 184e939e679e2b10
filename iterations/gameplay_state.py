"""The playing screen: the world of entities and the systems that drive it."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from iterations.animation_system import AnimationSystem
from iterations.camera_system import CameraSystem
from iterations.collision_system import CollisionSystem
from iterations.components import (
    AnimationClip,
    AnimationComponent,
    CameraComponent,
    CollisionComponent,
    FRect,
    PlayerComponent,
    RenderComponent,
    SpriteComponent,
    TilemapComponent,
    TransformComponent,
)
from iterations.debug_render_system import DebugRenderSystem
from iterations.ecs import World
from iterations.game_state import GameState
from iterations.input import Scancode
from iterations.movement_system import MovementSystem
from iterations.paused_state import PausedState
from iterations.render_system import RenderSystem
from iterations.tilemap_loader import TilemapLoadError, load_tilemap
from iterations.tilemap_system import TilemapSystem

if TYPE_CHECKING:
    from iterations.game import Game

logger = logging.getLogger(__name__)

PLAYER_TEXTURE_PATH = "assets/Idle.png"
MAP_PATH = "assets/map01.json"
PLAYER_START = (100.0, 100.0)
PLAYER_FRAME_SIZE = 64.0
PLAYER_FRAME_COUNT = 2
PLAYER_FRAME_DURATION = 0.15
BACKGROUND_COLOR = (20, 20, 20)


class GameplayState(GameState):
    """Holds the world; Escape pauses the game."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._world = World()

    @property
    def world(self) -> World:
        return self._world

    def on_enter(self) -> None:
        super().on_enter()
        logger.info("GameplayState: entered.")

    def on_exit(self) -> None:
        super().on_exit()
        logger.info("GameplayState: exited.")

    def init_entities(self, game: Game) -> None:
        """Create the player, the tile map and the camera."""
        world = self._world
        textures = game.texture_manager

        player = world.create_entity()
        world.add_component(player, TransformComponent(*PLAYER_START))
        world.add_component(player, PlayerComponent())
        # The hitbox is tighter than the 64px sprite frame.
        world.add_component(player, CollisionComponent(0.0, 0.0, 12.0, 12.0))

        texture = textures.load(PLAYER_TEXTURE_PATH)
        if texture is not None:
            world.add_component(player, SpriteComponent(texture=texture, offset_x=1.0))
            idle = AnimationClip(
                frames=[
                    FRect(i * PLAYER_FRAME_SIZE, 0.0, PLAYER_FRAME_SIZE, PLAYER_FRAME_SIZE)
                    for i in range(PLAYER_FRAME_COUNT)
                ],
                frame_duration=PLAYER_FRAME_DURATION,
                looping=True,
            )
            world.add_component(
                player, AnimationComponent(clips={"idle": idle}, current_clip="idle")
            )
        else:
            world.add_component(player, RenderComponent(16, 16, 255, 100, 100))
        logger.info("GameplayState: player entity %d created.", player)

        tilemap_entity = world.create_entity()
        try:
            tilemap = load_tilemap(MAP_PATH, textures)
        except TilemapLoadError as err:
            logger.warning("GameplayState: failed to load map (%s), tilemap will be empty.", err)
            tilemap = err.partial if err.partial is not None else TilemapComponent()
        world.add_component(tilemap_entity, tilemap)
        logger.info("GameplayState: tilemap entity %d created.", tilemap_entity)

        camera = world.create_entity()
        world.add_component(camera, CameraComponent(0.0, 0.0, self.width, self.height))
        logger.info("GameplayState: camera entity %d created.", camera)

    def init_systems(self, game: Game) -> None:
        """Register the update systems, then the render systems, in running order."""
        world = self._world
        world.add_update_system(MovementSystem(game.input, game.settings.gameplay.player_speed))
        world.add_update_system(CollisionSystem())
        world.add_update_system(CameraSystem())
        world.add_update_system(AnimationSystem())
        world.add_render_system(TilemapSystem(game.surface))
        world.add_render_system(RenderSystem(game.surface))
        world.add_render_system(DebugRenderSystem(game.debug_renderer, game.settings))

    def process_input(self, game: Game) -> None:
        if game.input.is_key_just_pressed(Scancode.ESCAPE):
            game.request_push_state(PausedState())

    def update(self, game: Game, delta_time: float) -> None:
        self._world.update_systems(delta_time)

    def draw_scene(self, game: Game, interpolation_alpha: float) -> None:
        game.surface.fill(BACKGROUND_COLOR)
        self._world.render_systems(0.0)

    def render(self, game: Game, interpolation_alpha: float) -> None:
        self.draw_scene(game, interpolation_alpha)