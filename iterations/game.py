"""The main loop and the stack of game states."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

import pygame

from iterations.debug_renderer import DebugRenderer
from iterations.game_state import GameState
from iterations.input import InputManager
from iterations.menu_state import MenuState
from iterations.settings import SettingsManager
from iterations.textures import TextureManager
from iterations.window import Window

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
EventSource = Callable[[], Iterable[Any]]


class _CommandType(Enum):
    PUSH = auto()
    POP = auto()
    REPLACE = auto()


@dataclass
class _StateCommand:
    kind: _CommandType
    state: GameState | None = None


def _pygame_events() -> Iterable[Any]:
    return pygame.event.get()


def _pygame_present() -> None:
    pygame.display.flip()


class Game:
    """Owns the window and shared services and runs the state on top of the stack.

    State changes are requested at any time and applied between the phases
    of a frame. Updates run at a fixed rate from the settings; rendering
    runs once per frame. Pieces not supplied are created from the settings.
    """

    def __init__(
        self,
        settings: SettingsManager | None = None,
        *,
        window: Any = None,
        input_manager: InputManager | None = None,
        texture_manager: TextureManager | None = None,
        debug_renderer: Any = None,
        initial_state: GameState | None = None,
        clock: Clock = time.perf_counter,
        events: EventSource = _pygame_events,
        present: Callable[[], None] = _pygame_present,
    ) -> None:
        self.settings = settings if settings is not None else SettingsManager()
        self._owned: list[Any] = []

        if window is None:
            window = Window(
                self.settings.window.title,
                self.settings.window.width,
                self.settings.window.height,
                self.settings.graphics.vsync,
                self.settings.graphics.screen_mode,
            )
            self._owned.append(window)
        self.window = window
        self.texture_manager = texture_manager if texture_manager is not None else TextureManager()
        if debug_renderer is None:
            debug_renderer = DebugRenderer(window.surface, self.settings)
            self._owned.append(debug_renderer)
        self.debug_renderer = debug_renderer
        self.input = input_manager if input_manager is not None else InputManager()

        self._clock = clock
        self._events = events
        self._present = present
        self._states: list[GameState] = []
        self._pending: list[_StateCommand] = []
        self._running = False

        if initial_state is None:
            initial_state = MenuState(self.settings.window.width, self.settings.window.height)
        self.request_push_state(initial_state)
        self.apply_pending_state_commands()
        self._running = True

    @property
    def surface(self) -> Any:
        """The surface every state draws onto."""
        return self.window.surface

    @property
    def window_width(self) -> int:
        return self.settings.window.width

    @property
    def window_height(self) -> int:
        return self.settings.window.height

    @property
    def running(self) -> bool:
        return self._running

    @property
    def states(self) -> tuple[GameState, ...]:
        """The state stack, bottom first."""
        return tuple(self._states)

    @property
    def current_state(self) -> GameState | None:
        return self._states[-1] if self._states else None

    def run(self) -> None:
        """Run frames until the game quits or the state stack is empty."""
        sim = self.settings.simulation
        tick_rate = max(1, sim.tick_rate_hz)
        max_substeps = max(1, sim.max_substeps_per_frame)
        fixed_delta = 1.0 / tick_rate
        max_frame_delta = max(fixed_delta, sim.max_frame_delta)

        last = self._clock()
        accumulator = 0.0
        while self._active():
            now = self._clock()
            frame_delta = min(now - last, max_frame_delta)
            last = now
            accumulator += frame_delta

            self._pump_events()
            self.input.begin_frame()
            self._top_process_input()
            self.apply_pending_state_commands()

            substeps = 0
            while accumulator >= fixed_delta and substeps < max_substeps:
                self._top_update(fixed_delta)
                accumulator -= fixed_delta
                substeps += 1
                self.apply_pending_state_commands()
                if not self._active():
                    break

            if substeps == max_substeps and accumulator >= fixed_delta:
                accumulator = 0.0
            if not self._active():
                break

            self._render(accumulator / fixed_delta, frame_delta)
            self.apply_pending_state_commands()

    def _active(self) -> bool:
        return self._running and bool(self._states)

    def _pump_events(self) -> None:
        for event in self._events():
            if event.type == pygame.QUIT:
                self._running = False

    def _top_process_input(self) -> None:
        if self._states:
            self._states[-1].process_input(self)

    def _top_update(self, delta_time: float) -> None:
        if self._states:
            self._states[-1].update(self, delta_time)

    def _render(self, interpolation_alpha: float, frame_delta: float) -> None:
        if self._states:
            self._states[-1].render(self, interpolation_alpha)
        self.debug_renderer.draw_fps(frame_delta)
        self._present()

    def request_push_state(self, state: GameState | None) -> None:
        """Ask for ``state`` to go on top of the stack; None is ignored."""
        if state is None:
            logger.warning("Game.request_push_state called with no state; command ignored.")
            return
        self._pending.append(_StateCommand(_CommandType.PUSH, state))

    def request_pop_state(self) -> None:
        """Ask for the top state to be removed."""
        self._pending.append(_StateCommand(_CommandType.POP))

    def request_replace_state(self, state: GameState | None) -> None:
        """Ask for the top state to be swapped for ``state``; None is ignored."""
        if state is None:
            logger.warning("Game.request_replace_state called with no state; command ignored.")
            return
        self._pending.append(_StateCommand(_CommandType.REPLACE, state))

    def apply_pending_state_commands(self) -> None:
        """Apply requested state changes in order, calling exit and enter hooks."""
        pending, self._pending = self._pending, []
        for command in pending:
            if command.kind is _CommandType.PUSH:
                if self._states:
                    self._states[-1].on_exit()
                self._enter(command.state)
            elif command.kind is _CommandType.POP:
                if not self._states:
                    continue
                self._states.pop().on_exit()
                if self._states:
                    self._states[-1].on_enter()
            else:
                if self._states:
                    self._states.pop().on_exit()
                self._enter(command.state)

    def _enter(self, state: GameState | None) -> None:
        if state is None:
            logger.warning("Game: pending state command without a state; command ignored.")
            return
        self._states.append(state)
        state.on_enter()

    def quit(self) -> None:
        """Stop the main loop after the current phase."""
        self._running = False

    def state_below(self) -> GameState | None:
        """The state under the top one, or None."""
        return self._states[-2] if len(self._states) >= 2 else None

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.texture_manager.unload_all()
        while self._owned:
            self._owned.pop().close()