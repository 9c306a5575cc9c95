"""Tests for the neon pygame skin (headless)."""

import pygame
import pytest

from neon_pong import Simulation
from neon_pong.events import PaddleHitEvent, ScoreChangedEvent, WallHitEvent
from neon_pong.game_state import Side
from neon_pong.skins import SKINS, NeonSkin, PongSkin


@pytest.fixture(scope='module', autouse=True)
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def skin():
    return NeonSkin()


@pytest.fixture
def screen():
    return pygame.Surface((960, 600))


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


class TestRegistry:
    """Test skin lookup."""

    def test_neon_registered(self):
        assert SKINS['neon'] is NeonSkin
        assert issubclass(NeonSkin, PongSkin)


class TestRender:
    """Test drawing snapshots."""

    def test_running_frame(self, skin, screen):
        sim = Simulation(seed=4)
        sim.start()
        skin.render(sim.snapshot(), screen)

        assert rgb(screen, (200, 5)) == NeonSkin.BACKGROUND_COLOR
        assert rgb(screen, (480, 300)) == NeonSkin.BALL_COLOR
        # Paddle outlines sit just outside the paddle rectangles
        assert rgb(screen, (23, 300)) == NeonSkin.PLAYER_COLOR
        assert rgb(screen, (921, 300)) == NeonSkin.CPU_COLOR

    def test_scaled_to_smaller_screen(self, skin):
        sim = Simulation(seed=4)
        sim.start()
        small = pygame.Surface((480, 300))
        skin.render(sim.snapshot(), small)
        assert rgb(small, (240, 150)) == NeonSkin.BALL_COLOR

    def test_idle_overlay_darkens_field(self, skin, screen):
        sim = Simulation(seed=4)
        skin.render(sim.snapshot(), screen)
        assert rgb(screen, (200, 5)) != NeonSkin.BACKGROUND_COLOR

    def test_game_over_overlay(self, skin, screen):
        sim = Simulation(seed=4, win_score=1)
        sim.start()
        sim.match.award_point(Side.PLAYER, sim.clock)
        frame = sim.snapshot()
        assert frame.overlay is not None
        skin.render(frame, screen)


class TestPulses:
    """Test edge glow from frame events."""

    def test_wall_and_paddle_pulses(self, skin):
        skin.on_events([
            WallHitEvent(edge='top'),
            PaddleHitEvent(side='left', speed=441.0),
            ScoreChangedEvent(side=Side.CPU, value=1),
        ])
        assert set(skin.active_pulses) == {'top', 'left'}
        assert skin.active_pulses['top'] == pytest.approx(NeonSkin.PULSE_DURATION)

    def test_pulses_fade(self, skin):
        skin.on_events([WallHitEvent(edge='bottom')])
        skin.update(0.1)
        assert skin.active_pulses['bottom'] == pytest.approx(0.04)
        skin.update(0.05)
        assert skin.active_pulses == {}

    def test_pulse_drawn_on_edge(self, skin, screen):
        sim = Simulation(seed=4)
        sim.start()
        skin.on_events([WallHitEvent(edge='top')])
        skin.render(sim.snapshot(), screen)
        assert rgb(screen, (200, 2)) != NeonSkin.BACKGROUND_COLOR
        assert rgb(screen, (200, 300)) == NeonSkin.BACKGROUND_COLOR
