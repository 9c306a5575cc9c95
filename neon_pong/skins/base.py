"""Base class for Neon Pong skins.

Skins handle ALL rendering - the simulation only manages state.
"""

from abc import ABC, abstractmethod
from typing import Iterable

import pygame

from neon_pong.events import AnyFrameEvent
from neon_pong.models import BallSnapshot, PaddleSnapshot, SimulationSnapshot


class PongSkin(ABC):
    """Base class for game skins.

    Skins draw snapshots and react to frame events (flashes, pulses).
    They never mutate the simulation.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_field(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render background and field markings.

        Args:
            frame: Current snapshot
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_paddle(
        self,
        paddle: PaddleSnapshot,
        is_player: bool,
        screen: pygame.Surface,
    ) -> None:
        """Render one paddle.

        Args:
            paddle: Paddle to render (playfield units)
            is_player: True for the left (human) paddle
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: BallSnapshot, screen: pygame.Surface) -> None:
        """Render the ball."""
        pass

    def render_hud(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render scores. Default: nothing."""
        pass

    def render_overlay(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render title/message panel when frame.overlay is set. Default: nothing."""
        pass

    def on_events(self, events: Iterable[AnyFrameEvent]) -> None:
        """React to events from the latest tick. Default: ignore."""
        pass

    def update(self, dt: float) -> None:
        """Advance skin animations."""
        pass

    def render(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render a complete frame in draw order."""
        self.render_field(frame, screen)
        self.render_ball(frame.ball, screen)
        self.render_paddle(frame.player, True, screen)
        self.render_paddle(frame.cpu, False, screen)
        self.render_hud(frame, screen)
        self.render_overlay(frame, screen)
