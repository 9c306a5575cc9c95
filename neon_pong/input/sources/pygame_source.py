"""
Pygame Input Source - Mouse and keyboard input for the desktop launcher.

Mouse motion becomes absolute pointer input; arrow keys and W/S become
directional input. Space/Enter start a match, R restarts, Esc quits.
"""
from typing import List

import pygame

from neon_pong.input.input_event import Command, DirectionalInput, PlayerInput, PointerInput
from neon_pong.input.sources.base import InputSource
from neon_pong.logging import get_logger

log = get_logger('input')

UP_KEYS = (pygame.K_UP, pygame.K_w)
DOWN_KEYS = (pygame.K_DOWN, pygame.K_s)
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


class PygameInputSource(InputSource):
    """Converts pygame events into player inputs and commands.

    Events this source does not use are re-posted to the pygame event queue
    for the main loop.
    """

    def __init__(self, display_height: float):
        """Initialize the source.

        Args:
            display_height: Window height in pixels, for pointer scaling
        """
        self._display_height = display_height
        self._up = False
        self._down = False
        self._event_queue: List[PlayerInput] = []
        self._command_queue: List[Command] = []

    def set_display_height(self, display_height: float) -> None:
        """Update pointer scaling after a window resize."""
        self._display_height = display_height

    def poll_events(self) -> List[PlayerInput]:
        """Get new player inputs since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def poll_commands(self) -> List[Command]:
        """Get new commands since last poll."""
        commands = self._command_queue.copy()
        self._command_queue.clear()
        return commands

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Translate one pygame event.

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.MOUSEMOTION:
            _, pos_y = event.pos
            self._event_queue.append(
                PointerInput(y=float(pos_y), display_height=self._display_height)
            )
            return True

        if event.type == pygame.QUIT:
            self._command_queue.append(Command.QUIT)
            return True

        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            pressed = event.type == pygame.KEYDOWN
            if event.key in UP_KEYS:
                self._set_keys(pressed, self._down)
                return True
            if event.key in DOWN_KEYS:
                self._set_keys(self._up, pressed)
                return True
            if pressed and event.key in START_KEYS:
                self._command_queue.append(Command.START)
                return True
            if pressed and event.key == pygame.K_r:
                self._command_queue.append(Command.RESTART)
                return True
            if pressed and event.key == pygame.K_ESCAPE:
                self._command_queue.append(Command.QUIT)
                return True

        return False

    def _set_keys(self, up: bool, down: bool) -> None:
        """Queue a directional update when the held state changes."""
        if (up, down) == (self._up, self._down):
            return
        self._up = up
        self._down = down
        self._event_queue.append(DirectionalInput(up=up, down=down))
        log.trace("Keys up=%s down=%s", up, down)

    def update(self, dt: float) -> None:
        """Process pygame events and collect inputs."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                pygame.event.post(event)
