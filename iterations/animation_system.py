"""Advances sprite animations and writes the current frame into each sprite."""

from __future__ import annotations

from dataclasses import replace

from iterations.components import AnimationComponent, SpriteComponent
from iterations.ecs import System, World


class AnimationSystem(System):
    """Steps the current clip of every animated sprite by at most one frame per tick."""

    def update(self, world: World, delta_time: float) -> None:
        animations = world.get_store(AnimationComponent)
        sprites = world.get_store(SpriteComponent)

        for entity in world.view(AnimationComponent, SpriteComponent):
            anim = animations.get(entity)
            if not anim.current_clip:
                continue
            clip = anim.clips.get(anim.current_clip)
            if clip is None or not clip.frames:
                continue

            anim.elapsed_time += delta_time
            if anim.elapsed_time >= clip.frame_duration:
                anim.elapsed_time -= clip.frame_duration
                anim.current_frame += 1
                if anim.current_frame >= len(clip.frames):
                    anim.current_frame = 0 if clip.looping else len(clip.frames) - 1

            sprites.get(entity).src_rect = replace(clip.frames[anim.current_frame])