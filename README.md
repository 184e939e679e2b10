# iterations

A small top-down tile-map game. A player walks around a map read from a
Tiled JSON file, a camera follows them, and the map's collision layer keeps
them out of walls and off the edge of the map. The game is built on a small
entity-component-system: plain component dataclasses
(`iterations.components`), a `World` that stores them (`iterations.ecs`), and
systems that update them at a fixed tick rate and draw them once per frame.

## Installing

```
pip install .
```

The game uses `pygame` for the window, keyboard, images and fonts.

## Playing

```
iterations
iterations --settings path/to/settings.json
```

The game opens on a menu. Use the Up and Down arrow keys to move between
`Start` and `Quit` and Return to choose. In play, move with W, A, S and D;
Escape pauses (the scene is shown dimmed) and Escape again resumes. Closing
the window ends the game.

At start the game reads `settings.json` from the current directory, or the
file given with `--settings`. A missing or unparsable file leaves every
setting at its default; a value of the wrong type is an error. Every key is
optional:

```json
{
    "window":     {"width": 800, "height": 600, "title": "Iterations"},
    "gameplay":   {"playerSpeed": 200.0},
    "simulation": {"tickRateHz": 60, "maxSubstepsPerFrame": 5, "maxFrameDelta": 0.25},
    "audio":      {"masterVolume": 1.0, "musicVolume": 1.0, "sfxVolume": 1.0},
    "graphics":   {"vsync": true, "screenMode": "windowed"},
    "debug":      {"mode": "off", "showFPS": false, "showCollision": false,
                   "spriteBounds": false, "showTileGrid": false, "showWalkability": false,
                   "debugFontPath": "assets/JetBrainsMono-Regular.ttf"},
    "keys":       {"moveUp": 26, "moveDown": 22, "moveLeft": 4, "moveRight": 7, "pause": 41}
}
```

- `screenMode` is `windowed`, `borderless` (a frameless window the size of
  the desktop) or `fullscreen`; any other value means `windowed`.
- Debug `mode` is `off`, `on` (every overlay drawn) or `perFlag` (only the
  flags set to true); any other value means `off`. The overlays are the FPS
  counter, collision hitboxes, sprite bounds, the tile grid and blocked
  tiles.
- `simulation` sets the fixed update rate, the most updates run in one
  frame, and the longest frame time counted.

Assets are looked up under `assets/`: the player sprite sheet `Idle.png`
(two 64×64 frames side by side; without it the player is drawn as a red
square), the map `map01.json`, and the menu font
`JetBrainsMono-Regular.ttf`. The map's first tileset supplies the tile image
and its column count; a tile layer named `ground` fills the tile grid and a
tile layer named `collision` marks every cell with a non-zero entry as
blocked. If the map cannot be read the game runs with an empty map.

## What the game does not do

- It plays no sound; the `audio` settings are read and written but not used.
- The `keys` settings are read and written, but movement always uses W, A,
  S and D and pausing always uses Escape.
- There is no options screen, and the game never writes the settings file
  itself; `SettingsManager.save` is there for programs that want to.

## Using the pieces

The ECS core works without a window:

```python
from iterations.ecs import World
from iterations.components import TransformComponent, PlayerComponent

world = World()
player = world.create_entity()
world.add_component(player, TransformComponent(x=100.0, y=100.0))
world.add_component(player, PlayerComponent())

for entity in world.view(PlayerComponent, TransformComponent):
    print(world.get_component(entity, TransformComponent))
```

Other parts that can be used on their own:

- `iterations.settings.SettingsManager` — `load`, `save`, `to_dict` and
  `is_debug_enabled`.
- `iterations.tilemap_loader.load_tilemap(path, texture_manager)` — returns
  a `TilemapComponent` or raises `TilemapLoadError`.
- `iterations.textures.TextureManager` and `iterations.input.InputManager`
  take an optional loader or keyboard-state callable, so they can be driven
  without pygame.
- `iterations.collision_system.overlaps_non_walkable` and the systems in
  `animation_system`, `camera_system`, `collision_system` and
  `movement_system` work on a `World` alone.

## Running the tests

```
pip install .[test]
pytest
```