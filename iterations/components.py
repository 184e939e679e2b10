"""Plain data components attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Vec2i:
    """A 2D integer vector."""

    x: int = 0
    y: int = 0


@dataclass
class Vec2f:
    """A 2D float vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class FRect:
    """A floating-point rectangle: top-left corner plus size."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


@dataclass
class AnimationClip:
    """A sequence of source rectangles played at a fixed rate."""

    frames: list[FRect] = field(default_factory=list)
    frame_duration: float = 0.1
    looping: bool = True


@dataclass
class AnimationComponent:
    """Named clips and the playback position within the current one."""

    clips: dict[str, AnimationClip] = field(default_factory=dict)
    current_clip: str = ""
    current_frame: int = 0
    elapsed_time: float = 0.0


@dataclass
class CameraComponent:
    """Marks the active camera; x and y are the viewport's top-left in world space."""

    x: float = 0.0
    y: float = 0.0
    viewport_width: int = 0
    viewport_height: int = 0


@dataclass
class CollisionComponent:
    """Axis-aligned hitbox centred on the transform, shifted by the offsets.

    Width and height are the full size of the box, not half-extents.
    """

    offset_x: float = 0.0
    offset_y: float = 0.0
    width: float = 16.0
    height: float = 16.0


@dataclass
class PlayerComponent:
    """Tag marking the player-controlled entity."""


@dataclass
class RenderComponent:
    """A solid coloured rectangle centred on the transform."""

    width: int
    height: int
    r: int
    g: int
    b: int


@dataclass
class SpriteComponent:
    """A texture drawn centred on the transform, shifted by the offsets.

    When ``src_rect`` is None the whole texture is drawn.
    """

    texture: Any = None
    src_rect: FRect | None = None
    offset_x: float = 0.0
    offset_y: float = 0.0
    debug_draw: bool = False


@dataclass
class Tile:
    """One cell of a tile grid."""

    id: int = 0


@dataclass
class TilemapComponent:
    """A grid of tiles, the set of blocked cell indices and the tileset image.

    Blocked cells are stored by index ``row * columns + col``.
    """

    grid: list[list[Tile]] = field(default_factory=list)
    blocked_tiles: set[int] = field(default_factory=set)
    tileset: Any = None
    tile_width: int = 16
    tile_height: int = 16
    tileset_columns: int = 0

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    @property
    def columns(self) -> int:
        """Number of columns, taken from the first row."""
        return len(self.grid[0]) if self.grid else 0

    def is_blocked(self, row: int, col: int) -> bool:
        """Whether the cell at (row, col) is listed as blocked.

        Cells outside the grid are not listed and give False.
        """
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            return False
        return row * self.columns + col in self.blocked_tiles


@dataclass
class TransformComponent:
    """World position, plus the position held before the last move."""

    x: float = 0.0
    y: float = 0.0
    prev_x: float = 0.0
    prev_y: float = 0.0