"""The interface every screen of the game implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class GameState(ABC):
    """One screen on the game's state stack.

    ``draw_scene`` draws without clearing or presenting; overlay states call
    it on the state below them. By default it simply renders.

    ``active`` is true while the state is the top of the stack.
    """

    active: bool = False

    def on_enter(self) -> None:
        """Called when the state becomes the top of the stack."""
        self.active = True

    def on_exit(self) -> None:
        """Called when the state stops being the top of the stack."""
        self.active = False

    @abstractmethod
    def process_input(self, game: Any) -> None:
        """React to this frame's input."""

    @abstractmethod
    def update(self, game: Any, delta_time: float) -> None:
        """Advance by one fixed step of ``delta_time`` seconds."""

    @abstractmethod
    def render(self, game: Any, interpolation_alpha: float) -> None:
        """Draw the state for this frame."""

    def draw_scene(self, game: Any, interpolation_alpha: float) -> None:
        """Draw the scene for compositing under an overlay."""
        self.render(game, interpolation_alpha)