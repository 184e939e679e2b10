import json

import pytest

from iterations.settings import DebugMode, ScreenMode, SettingsManager


def write(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults():
    s = SettingsManager()
    assert (s.window.width, s.window.height, s.window.title) == (800, 600, "Iterations")
    assert s.gameplay.player_speed == 200.0
    assert s.simulation.tick_rate_hz == 60
    assert s.simulation.max_substeps_per_frame == 5
    assert s.simulation.max_frame_delta == 0.25
    assert s.graphics.vsync is True
    assert s.graphics.screen_mode is ScreenMode.WINDOWED
    assert s.debug.mode is DebugMode.OFF
    assert (s.keys.move_up, s.keys.move_down, s.keys.move_left, s.keys.move_right, s.keys.pause) == (
        26, 22, 4, 7, 41
    )


def test_load_missing_file_keeps_defaults(tmp_path):
    s = SettingsManager()
    assert s.load(tmp_path / "absent.json") is False
    assert s == SettingsManager()


def test_load_malformed_file_returns_false(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{ not json", encoding="utf-8")
    s = SettingsManager()
    assert s.load(path) is False
    assert s == SettingsManager()


def test_partial_section_keeps_other_defaults(tmp_path):
    path = write(tmp_path, {"window": {"width": 1024}})
    s = SettingsManager()
    assert s.load(path) is True
    assert s.window.width == 1024
    assert s.window.height == 600
    assert s.window.title == "Iterations"
    assert s.keys == SettingsManager().keys


def test_save_load_round_trip(tmp_path):
    original = SettingsManager()
    original.window.title = "Test"
    original.gameplay.player_speed = 150.5
    original.simulation.tick_rate_hz = 120
    original.graphics.screen_mode = ScreenMode.BORDERLESS
    original.graphics.vsync = False
    original.debug.mode = DebugMode.PER_FLAG
    original.debug.show_fps = True
    original.keys.pause = 19
    path = tmp_path / "out.json"
    original.save(path)

    loaded = SettingsManager()
    assert loaded.load(path) is True
    assert loaded == original


def test_saved_file_matches_to_dict_with_sorted_keys(tmp_path):
    s = SettingsManager()
    s.graphics.screen_mode = ScreenMode.FULLSCREEN
    path = tmp_path / "out.json"
    s.save(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == s.to_dict()
    assert list(data) == sorted(data)
    assert data["graphics"]["screenMode"] == "fullscreen"
    assert data["debug"]["mode"] == "off"


def test_unknown_screen_mode_falls_back_to_windowed(tmp_path):
    path = write(tmp_path, {"graphics": {"screenMode": "stretched"}})
    s = SettingsManager()
    s.graphics.screen_mode = ScreenMode.FULLSCREEN
    s.load(path)
    assert s.graphics.screen_mode is ScreenMode.WINDOWED


def test_graphics_section_without_mode_resets_to_windowed(tmp_path):
    path = write(tmp_path, {"graphics": {"vsync": False}})
    s = SettingsManager()
    s.graphics.screen_mode = ScreenMode.BORDERLESS
    s.load(path)
    assert s.graphics.screen_mode is ScreenMode.WINDOWED
    assert s.graphics.vsync is False


def test_debug_mode_parsing(tmp_path):
    path = write(tmp_path, {"debug": {"mode": "perFlag", "showCollision": True}})
    s = SettingsManager()
    s.load(path)
    assert s.debug.mode is DebugMode.PER_FLAG
    assert s.debug.show_collision is True
    assert s.debug.show_tile_grid is False


def test_wrong_type_raises(tmp_path):
    path = write(tmp_path, {"window": {"width": "wide"}})
    with pytest.raises(TypeError):
        SettingsManager().load(path)


def test_non_object_root_loads_nothing(tmp_path):
    path = write(tmp_path, [1, 2, 3])
    s = SettingsManager()
    assert s.load(path) is True
    assert s == SettingsManager()


@pytest.mark.parametrize(
    "mode, flag, expected",
    [
        (DebugMode.OFF, True, False),
        (DebugMode.OFF, False, False),
        (DebugMode.ON, False, True),
        (DebugMode.ON, True, True),
        (DebugMode.PER_FLAG, True, True),
        (DebugMode.PER_FLAG, False, False),
    ],
)
def test_is_debug_enabled(mode, flag, expected):
    s = SettingsManager()
    s.debug.mode = mode
    assert s.is_debug_enabled(flag) is expected