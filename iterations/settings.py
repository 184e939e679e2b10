"""Game settings grouped by category, read from and written to JSON."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class DebugMode(Enum):
    """How debug drawing is decided."""

    OFF = "off"
    PER_FLAG = "perFlag"
    ON = "on"


class ScreenMode(Enum):
    WINDOWED = "windowed"
    BORDERLESS = "borderless"
    FULLSCREEN = "fullscreen"


@dataclass
class DebugSettings:
    mode: DebugMode = DebugMode.OFF
    sprite_bounds: bool = False
    show_tile_grid: bool = False
    show_walkability: bool = False
    show_collision: bool = False
    show_fps: bool = False
    debug_font_path: str = "assets/JetBrainsMono-Regular.ttf"


@dataclass
class WindowSettings:
    width: int = 800
    height: int = 600
    title: str = "Iterations"


@dataclass
class GameplaySettings:
    player_speed: float = 200.0


@dataclass
class SimulationSettings:
    tick_rate_hz: int = 60
    max_substeps_per_frame: int = 5
    max_frame_delta: float = 0.25


@dataclass
class AudioSettings:
    master_volume: float = 1.0
    music_volume: float = 1.0
    sfx_volume: float = 1.0


@dataclass
class GraphicsSettings:
    vsync: bool = True
    screen_mode: ScreenMode = ScreenMode.WINDOWED


@dataclass
class KeyBindings:
    """Scancodes for the player's actions."""

    move_up: int = 26
    move_down: int = 22
    move_left: int = 4
    move_right: int = 7
    pause: int = 41


def _value(section: dict[str, Any], key: str, default: Any) -> Any:
    """Return ``section[key]`` converted to the type of ``default``, or ``default``."""
    if key not in section:
        return default
    value = section[key]
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
    elif isinstance(default, int):
        if is_number:
            return int(value)
    elif isinstance(default, float):
        if is_number:
            return float(value)
    elif isinstance(default, str):
        if isinstance(value, str):
            return value
    raise TypeError(f"setting {key!r} has the wrong type: {value!r}")


def _section(root: Any, name: str) -> dict[str, Any] | None:
    if not isinstance(root, dict) or name not in root:
        return None
    section = root[name]
    if not isinstance(section, dict):
        raise TypeError(f"settings section {name!r} is not an object")
    return section


@dataclass
class SettingsManager:
    """All settings categories; missing keys keep their defaults."""

    window: WindowSettings = field(default_factory=WindowSettings)
    gameplay: GameplaySettings = field(default_factory=GameplaySettings)
    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    audio: AudioSettings = field(default_factory=AudioSettings)
    graphics: GraphicsSettings = field(default_factory=GraphicsSettings)
    debug: DebugSettings = field(default_factory=DebugSettings)
    keys: KeyBindings = field(default_factory=KeyBindings)

    def load(self, path: PathLike) -> bool:
        """Read settings from a JSON file.

        Return True if the file was read. A missing or malformed file leaves
        the current values untouched and gives False. A value of the wrong
        type raises TypeError.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError:
            logger.info("SettingsManager: no file at '%s', using defaults.", path)
            return False
        try:
            root = json.loads(text)
        except json.JSONDecodeError as err:
            logger.warning("SettingsManager: parse error in '%s': %s", path, err)
            return False
        self._apply(root)
        logger.info("SettingsManager: loaded '%s'.", path)
        return True

    def _apply(self, root: Any) -> None:
        if (w := _section(root, "window")) is not None:
            self.window.width = _value(w, "width", self.window.width)
            self.window.height = _value(w, "height", self.window.height)
            self.window.title = _value(w, "title", self.window.title)

        if (g := _section(root, "gameplay")) is not None:
            self.gameplay.player_speed = _value(g, "playerSpeed", self.gameplay.player_speed)

        if (s := _section(root, "simulation")) is not None:
            sim = self.simulation
            sim.tick_rate_hz = _value(s, "tickRateHz", sim.tick_rate_hz)
            sim.max_substeps_per_frame = _value(
                s, "maxSubstepsPerFrame", sim.max_substeps_per_frame
            )
            sim.max_frame_delta = _value(s, "maxFrameDelta", sim.max_frame_delta)

        if (a := _section(root, "audio")) is not None:
            self.audio.master_volume = _value(a, "masterVolume", self.audio.master_volume)
            self.audio.music_volume = _value(a, "musicVolume", self.audio.music_volume)
            self.audio.sfx_volume = _value(a, "sfxVolume", self.audio.sfx_volume)

        if (gr := _section(root, "graphics")) is not None:
            self.graphics.vsync = _value(gr, "vsync", self.graphics.vsync)
            mode = _value(gr, "screenMode", ScreenMode.WINDOWED.value)
            try:
                self.graphics.screen_mode = ScreenMode(mode)
            except ValueError:
                self.graphics.screen_mode = ScreenMode.WINDOWED

        if (d := _section(root, "debug")) is not None:
            dbg = self.debug
            mode = _value(d, "mode", DebugMode.OFF.value)
            try:
                dbg.mode = DebugMode(mode)
            except ValueError:
                dbg.mode = DebugMode.OFF
            dbg.sprite_bounds = _value(d, "spriteBounds", dbg.sprite_bounds)
            dbg.show_tile_grid = _value(d, "showTileGrid", dbg.show_tile_grid)
            dbg.show_walkability = _value(d, "showWalkability", dbg.show_walkability)
            dbg.show_collision = _value(d, "showCollision", dbg.show_collision)
            dbg.show_fps = _value(d, "showFPS", dbg.show_fps)
            dbg.debug_font_path = _value(d, "debugFontPath", dbg.debug_font_path)

        if (k := _section(root, "keys")) is not None:
            keys = self.keys
            keys.move_up = _value(k, "moveUp", keys.move_up)
            keys.move_down = _value(k, "moveDown", keys.move_down)
            keys.move_left = _value(k, "moveLeft", keys.move_left)
            keys.move_right = _value(k, "moveRight", keys.move_right)
            keys.pause = _value(k, "pause", keys.pause)

    def to_dict(self) -> dict[str, Any]:
        """The settings as the JSON document that ``save`` writes."""
        return {
            "window": {
                "width": self.window.width,
                "height": self.window.height,
                "title": self.window.title,
            },
            "gameplay": {"playerSpeed": self.gameplay.player_speed},
            "simulation": {
                "tickRateHz": self.simulation.tick_rate_hz,
                "maxSubstepsPerFrame": self.simulation.max_substeps_per_frame,
                "maxFrameDelta": self.simulation.max_frame_delta,
            },
            "audio": {
                "masterVolume": self.audio.master_volume,
                "musicVolume": self.audio.music_volume,
                "sfxVolume": self.audio.sfx_volume,
            },
            "graphics": {
                "vsync": self.graphics.vsync,
                "screenMode": self.graphics.screen_mode.value,
            },
            "debug": {
                "mode": self.debug.mode.value,
                "spriteBounds": self.debug.sprite_bounds,
                "showTileGrid": self.debug.show_tile_grid,
                "showWalkability": self.debug.show_walkability,
                "showCollision": self.debug.show_collision,
                "showFPS": self.debug.show_fps,
                "debugFontPath": self.debug.debug_font_path,
            },
            "keys": {
                "moveUp": self.keys.move_up,
                "moveDown": self.keys.move_down,
                "moveLeft": self.keys.move_left,
                "moveRight": self.keys.move_right,
                "pause": self.keys.pause,
            },
        }

    def save(self, path: PathLike) -> None:
        """Write the settings as JSON with sorted keys; raise OSError on failure."""
        text = json.dumps(self.to_dict(), indent=4, sort_keys=True)
        Path(path).write_text(text, encoding="utf-8")
        logger.info("SettingsManager: saved '%s'.", path)

    def is_debug_enabled(self, flag: bool) -> bool:
        """Whether a debug feature is on, with ON and OFF overriding ``flag``."""
        if self.debug.mode is DebugMode.ON:
            return True
        if self.debug.mode is DebugMode.PER_FLAG:
            return flag
        return False