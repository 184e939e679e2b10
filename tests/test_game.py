import itertools
from types import SimpleNamespace

import pygame

from iterations.game import Game
from iterations.game_state import GameState
from iterations.input import InputManager
from iterations.menu_state import MenuState
from iterations.settings import SettingsManager
from iterations.textures import TextureManager


class RecordingDebug:
    def __init__(self):
        self.fps = []

    def draw_fps(self, delta_time):
        self.fps.append(delta_time)

    def draw_rect(self, x, y, w, h, color=(255, 0, 255, 255)):
        pass

    def draw_filled_rect(self, x, y, w, h, color=(255, 0, 0, 80)):
        pass

    def draw_text(self, x, y, text, color=(255, 255, 0, 255)):
        pass


class Recorder(GameState):
    def __init__(self, name, log, quit_after_renders=None, pop_on_update=False):
        self.name = name
        self.log = log
        self.quit_after_renders = quit_after_renders
        self.pop_on_update = pop_on_update
        self.inputs = 0
        self.updates = []
        self.alphas = []

    def on_enter(self):
        self.log.append(("enter", self.name))

    def on_exit(self):
        self.log.append(("exit", self.name))

    def process_input(self, game):
        self.inputs += 1

    def update(self, game, delta_time):
        self.updates.append(delta_time)
        if self.pop_on_update:
            game.request_pop_state()

    def render(self, game, interpolation_alpha):
        self.alphas.append(interpolation_alpha)
        if self.quit_after_renders is not None and len(self.alphas) >= self.quit_after_renders:
            game.quit()


def no_images(path):
    raise OSError(path)


def ticker(step):
    times = itertools.count(0.0, step)
    return lambda: next(times)


def make_game(state=None, settings=None, clock=None, events=None):
    settings = settings or SettingsManager()
    keys = [False] * 512
    return Game(
        settings,
        window=SimpleNamespace(surface=pygame.Surface((800, 600))),
        input_manager=InputManager(source=lambda: keys),
        texture_manager=TextureManager(loader=no_images),
        debug_renderer=RecordingDebug(),
        initial_state=state,
        clock=clock or ticker(0.25),
        events=events or (lambda: []),
        present=lambda: None,
    )


def test_initial_state_is_entered():
    log = []
    first = Recorder("a", log)
    game = make_game(first)
    assert log == [("enter", "a")]
    assert game.current_state is first
    assert game.running is True


def test_default_initial_state_is_menu():
    game = make_game()
    assert isinstance(game.current_state, MenuState)
    assert len(game.states) == 1
    assert game.state_below() is None


def test_push_is_deferred_until_applied():
    log = []
    first, second = Recorder("a", log), Recorder("b", log)
    game = make_game(first)
    game.request_push_state(second)
    assert game.current_state is first
    game.apply_pending_state_commands()
    assert game.current_state is second
    assert game.state_below() is first
    assert log == [("enter", "a"), ("exit", "a"), ("enter", "b")]


def test_pop_reenters_state_below():
    log = []
    first, second = Recorder("a", log), Recorder("b", log)
    game = make_game(first)
    game.request_push_state(second)
    game.apply_pending_state_commands()
    game.request_pop_state()
    game.apply_pending_state_commands()
    assert game.states == (first,)
    assert log[-2:] == [("exit", "b"), ("enter", "a")]


def test_pop_on_empty_stack_is_ignored():
    log = []
    game = make_game(Recorder("a", log))
    game.request_pop_state()
    game.request_pop_state()
    game.apply_pending_state_commands()
    assert game.states == ()
    assert log == [("enter", "a"), ("exit", "a")]


def test_replace_swaps_top_state():
    log = []
    first, second = Recorder("a", log), Recorder("b", log)
    game = make_game(first)
    game.request_replace_state(second)
    game.apply_pending_state_commands()
    assert game.states == (second,)
    assert log == [("enter", "a"), ("exit", "a"), ("enter", "b")]


def test_requests_without_state_are_ignored():
    log = []
    first = Recorder("a", log)
    game = make_game(first)
    game.request_push_state(None)
    game.request_replace_state(None)
    game.apply_pending_state_commands()
    assert game.states == (first,)


def test_quit_stops_running():
    game = make_game(Recorder("a", []))
    game.quit()
    assert game.running is False


def test_run_updates_at_fixed_rate_and_renders():
    settings = SettingsManager()
    settings.simulation.tick_rate_hz = 4
    state = Recorder("a", [], quit_after_renders=1)
    game = make_game(state, settings=settings, clock=ticker(0.25))
    game.run()
    assert state.updates == [0.25]
    assert state.alphas == [0.0]
    assert state.inputs == 1
    assert game.debug_renderer.fps == [0.25]


def test_run_clamps_long_frames():
    settings = SettingsManager()
    settings.simulation.max_frame_delta = 0.25
    state = Recorder("a", [], quit_after_renders=1)
    game = make_game(state, settings=settings, clock=ticker(10.0))
    game.run()
    assert game.debug_renderer.fps == [0.25]


def test_run_caps_substeps_and_drops_backlog():
    settings = SettingsManager()
    settings.simulation.tick_rate_hz = 4
    settings.simulation.max_substeps_per_frame = 2
    settings.simulation.max_frame_delta = 1.0
    state = Recorder("a", [], quit_after_renders=1)
    game = make_game(state, settings=settings, clock=ticker(1.0))
    game.run()
    assert len(state.updates) == settings.simulation.max_substeps_per_frame
    assert state.alphas == [0.0]


def test_quit_event_ends_run_before_rendering():
    state = Recorder("a", [])
    game = make_game(state, events=lambda: [SimpleNamespace(type=pygame.QUIT)])
    game.run()
    assert state.alphas == []
    assert game.running is False


def test_run_ends_when_stack_empties():
    log = []
    state = Recorder("a", log, pop_on_update=True)
    game = make_game(state)
    game.run()
    assert game.states == ()
    assert log[-1] == ("exit", "a")
    assert state.alphas == []