"""Tests for input values and the pygame input source."""

import pygame
import pytest

from neon_pong.input import Command, DirectionalInput, PointerInput
from neon_pong.input.sources import InputSource
from neon_pong.input.sources.pygame_source import PygameInputSource


class TestPointerInput:
    """Test pointer validation and scaling."""

    def test_field_units(self):
        assert PointerInput(y=123.0).to_field(600) == 123.0

    def test_display_scaling(self):
        assert PointerInput(y=400, display_height=1200).to_field(600) == 200

    @pytest.mark.parametrize('y', [float('nan'), float('inf'), float('-inf')])
    def test_non_finite_y(self, y):
        with pytest.raises(ValueError, match='finite'):
            PointerInput(y=y)

    @pytest.mark.parametrize('height', [0, -10, float('nan')])
    def test_bad_display_height(self, height):
        with pytest.raises(ValueError):
            PointerInput(y=10, display_height=height)

    def test_immutable(self):
        pointer = PointerInput(y=10)
        with pytest.raises(AttributeError):
            pointer.y = 20

    def test_str(self):
        assert str(PointerInput(y=12.5)) == "PointerInput(y=12.50, display_height=None)"


class TestDirectionalInput:
    """Test directional defaults."""

    def test_defaults(self):
        held = DirectionalInput()
        assert held.up is False
        assert held.down is False

    def test_equality(self):
        assert DirectionalInput(up=True) == DirectionalInput(up=True, down=False)


@pytest.fixture
def source():
    return PygameInputSource(display_height=300)


def key_event(event_type, key):
    return pygame.event.Event(event_type, key=key, mod=0, unicode='', scancode=0)


class TestPygameInputSource:
    """Test translation of pygame events."""

    def test_is_input_source(self, source):
        assert isinstance(source, InputSource)

    def test_mouse_motion(self, source):
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(40, 150), rel=(0, 0), buttons=(0, 0, 0))
        assert source.handle_event(event)
        [pointer] = source.poll_events()
        assert pointer == PointerInput(y=150.0, display_height=300)
        assert pointer.to_field(600) == 300

    def test_display_height_update(self, source):
        source.set_display_height(600)
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 150), rel=(0, 0), buttons=(0, 0, 0))
        source.handle_event(event)
        assert source.poll_events()[0].to_field(600) == 150

    def test_arrow_keys(self, source):
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        source.handle_event(key_event(pygame.KEYUP, pygame.K_UP))
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_s))
        assert source.poll_events() == [
            DirectionalInput(up=True, down=False),
            DirectionalInput(up=False, down=False),
            DirectionalInput(up=False, down=True),
        ]

    def test_repeat_keydown_not_duplicated(self, source):
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_w))
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_w))
        assert source.poll_events() == [DirectionalInput(up=True)]

    def test_both_keys_held(self, source):
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_DOWN))
        assert source.poll_events()[-1] == DirectionalInput(up=True, down=True)

    @pytest.mark.parametrize('key,command', [
        (pygame.K_SPACE, Command.START),
        (pygame.K_RETURN, Command.START),
        (pygame.K_r, Command.RESTART),
        (pygame.K_ESCAPE, Command.QUIT),
    ])
    def test_commands(self, source, key, command):
        assert source.handle_event(key_event(pygame.KEYDOWN, key))
        assert source.poll_commands() == [command]
        assert source.poll_events() == []

    def test_window_close(self, source):
        assert source.handle_event(pygame.event.Event(pygame.QUIT))
        assert source.poll_commands() == [Command.QUIT]

    def test_command_key_release_ignored(self, source):
        assert not source.handle_event(key_event(pygame.KEYUP, pygame.K_SPACE))
        assert source.poll_commands() == []

    def test_unhandled_key(self, source):
        assert not source.handle_event(key_event(pygame.KEYDOWN, pygame.K_f))

    def test_poll_drains_queue(self, source):
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        assert len(source.poll_events()) == 1
        assert source.poll_events() == []

    def test_clear(self, source):
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        source.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
        source.clear()
        assert source.poll_events() == []
        assert source.poll_commands() == []
