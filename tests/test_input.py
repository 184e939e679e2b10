from iterations.input import InputManager, Scancode
from iterations.settings import KeyBindings


def make_input(count=128):
    state = [False] * count
    return state, InputManager(lambda: state)


def test_scancodes_match_default_key_bindings():
    keys = KeyBindings()
    assert Scancode.W == keys.move_up
    assert Scancode.S == keys.move_down
    assert Scancode.A == keys.move_left
    assert Scancode.D == keys.move_right
    assert Scancode.ESCAPE == keys.pause


def test_key_count_is_taken_from_first_snapshot():
    _, manager = make_input(count=50)
    assert manager.key_count == 50


def test_key_down_after_begin_frame():
    state, manager = make_input()
    state[Scancode.W] = True
    assert manager.is_key_down(Scancode.W) is False
    manager.begin_frame()
    assert manager.is_key_down(Scancode.W) is True
    assert manager.is_key_down(Scancode.S) is False


def test_just_pressed_only_on_first_frame():
    state, manager = make_input()
    state[Scancode.RETURN] = True
    manager.begin_frame()
    assert manager.is_key_just_pressed(Scancode.RETURN) is True
    manager.begin_frame()
    assert manager.is_key_just_pressed(Scancode.RETURN) is False
    assert manager.is_key_down(Scancode.RETURN) is True


def test_just_released_only_on_release_frame():
    state, manager = make_input()
    state[Scancode.ESCAPE] = True
    manager.begin_frame()
    assert manager.is_key_just_released(Scancode.ESCAPE) is False
    state[Scancode.ESCAPE] = False
    manager.begin_frame()
    assert manager.is_key_just_released(Scancode.ESCAPE) is True
    manager.begin_frame()
    assert manager.is_key_just_released(Scancode.ESCAPE) is False


def test_key_held_at_creation_is_not_just_pressed():
    state = [False] * 128
    state[Scancode.UP] = True
    manager = InputManager(lambda: state)
    assert manager.is_key_down(Scancode.UP) is True
    assert manager.is_key_just_pressed(Scancode.UP) is False


def test_out_of_range_keys_are_never_down():
    state, manager = make_input(count=10)
    state[:] = [True] * 10
    manager.begin_frame()
    for key in (-1, 10, Scancode.UP):
        assert manager.is_key_down(key) is False
        assert manager.is_key_just_pressed(key) is False
        assert manager.is_key_just_released(key) is False


def test_keys_beyond_initial_count_are_ignored():
    state, manager = make_input(count=10)
    state.extend([True] * 10)
    manager.begin_frame()
    assert manager.is_key_down(15) is False
    assert manager.key_count == 10