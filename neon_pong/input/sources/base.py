"""
Input source interface.

A source turns some device (window events, a touch surface, a test script)
into queued player inputs and lifecycle commands. The launcher drains both
queues once per frame.
"""
from abc import ABC, abstractmethod
from typing import List

from neon_pong.input.input_event import Command, PlayerInput


class InputSource(ABC):
    """Queues player inputs and commands between polls."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Read the device and queue whatever arrived since the last frame."""
        pass

    @abstractmethod
    def poll_events(self) -> List[PlayerInput]:
        """Drain queued player inputs, oldest first."""
        pass

    @abstractmethod
    def poll_commands(self) -> List[Command]:
        """Drain queued start/restart/quit commands, oldest first."""
        pass

    def clear(self) -> None:
        """Discard both queues."""
        self.poll_events()
        self.poll_commands()
