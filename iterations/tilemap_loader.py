"""Reads a tile map in the Tiled JSON format into a TilemapComponent."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Union

from iterations.components import Tile, TilemapComponent
from iterations.textures import TextureManager

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class TilemapLoadError(Exception):
    """The map could not be loaded.

    ``partial`` holds whatever was read before the failure, or None.
    """

    def __init__(self, message: str, partial: TilemapComponent | None = None) -> None:
        super().__init__(message)
        self.partial = partial


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TilemapLoadError(f"{what} is not an object")
    return value


def _int(section: dict[str, Any], key: str, default: int) -> int:
    if key not in section:
        return default
    return _number(section[key], key)


def _number(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TilemapLoadError(f"{what} is not a number: {value!r}")
    return int(value)


def _str(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise TilemapLoadError(f"{key} is not a string: {value!r}")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise TilemapLoadError(f"{what} is not an array")
    return value


def load_tilemap(path: PathLike, texture_manager: TextureManager) -> TilemapComponent:
    """Load a map whose "ground" layer fills the grid and "collision" layer the blocked set.

    Tile ids are the file's global ids less one; an id of 0 stays 0. Any
    non-zero entry of the collision layer blocks the cell at that index.
    Raise TilemapLoadError if the file is missing, malformed, has no size
    or has no layers.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise TilemapLoadError(f"could not open '{path}'") from err
    try:
        data = _object(json.loads(text), "map")
    except json.JSONDecodeError as err:
        raise TilemapLoadError(f"parse error in '{path}': {err}") from err

    columns = _int(data, "width", 0)
    rows = _int(data, "height", 0)
    tile_width = _int(data, "tilewidth", 16)
    tile_height = _int(data, "tileheight", 16)
    if columns <= 0 or rows <= 0:
        raise TilemapLoadError(f"invalid map dimensions in '{path}'")

    tilemap = TilemapComponent(
        grid=[[Tile() for _ in range(columns)] for _ in range(rows)],
        tile_width=tile_width,
        tile_height=tile_height,
    )

    tilesets = data.get("tilesets")
    if tilesets:
        entry = _object(_list(tilesets, "tilesets")[0], "tileset")
        image = _str(entry, "image", "")
        tilemap.tileset_columns = _int(entry, "columns", 0)
        if image:
            tilemap.tileset = texture_manager.load(image)
            if tilemap.tileset is None:
                logger.warning("TilemapLoader: failed to load tileset texture '%s'.", image)

    if "layers" not in data:
        raise TilemapLoadError(f"no layers found in '{path}'", partial=tilemap)

    for raw_layer in _list(data["layers"], "layers"):
        layer = _object(raw_layer, "layer")
        name = _str(layer, "name", "")
        if _str(layer, "type", "") != "tilelayer" or "data" not in layer:
            continue
        gids = [_number(gid, "tile id") for gid in _list(layer["data"], "layer data")]

        if name == "ground":
            for index, gid in enumerate(gids):
                row, col = divmod(index, columns)
                if row < rows:
                    tilemap.grid[row][col].id = gid - 1 if gid > 0 else 0
            logger.info("TilemapLoader: loaded ground layer (%dx%d).", columns, rows)
        elif name == "collision":
            tilemap.blocked_tiles.update(index for index, gid in enumerate(gids) if gid != 0)
            logger.info(
                "TilemapLoader: loaded collision layer (%d blocked tiles).",
                len(tilemap.blocked_tiles),
            )

    logger.info("TilemapLoader: loaded '%s' (%dx%d tiles).", path, columns, rows)
    return tilemap