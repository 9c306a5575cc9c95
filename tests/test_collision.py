"""
Tests for collision detection and response.

Paddles use the default layout on a 960x600 field: the player paddle
spans x 24..38 (height 120), the CPU paddle x 922..936 (height 80).
"""

import math

import pytest

from neon_pong.config import MAX_BOUNCE_ANGLE
from neon_pong.entities import Ball, BallConfig, ComputerPaddle, PlayerPaddle
from neon_pong.events import PaddleHitEvent, WallHitEvent
from neon_pong.game_state import Side
from neon_pong.physics import (
    advance_ball,
    bounce_angle,
    bounce_off_paddle,
    bounce_velocity,
    check_paddle_collision,
    check_scoring,
    check_wall_collision,
)


@pytest.fixture
def player():
    return PlayerPaddle(24, 14, 120, 600)


@pytest.fixture
def cpu():
    return ComputerPaddle(922, 14, 80, 600)


def make_ball(x, y, vx=0.0, vy=0.0):
    ball = Ball(BallConfig(), x, y)
    ball.set_velocity(vx, vy)
    return ball


class TestWallCollision:
    """Test top and bottom wall reflection."""

    def test_top_wall(self):
        ball = make_ball(480, 5, vy=-100)
        assert check_wall_collision(ball, 600) == 'top'
        assert ball.vy == 100
        assert ball.y == 10

    def test_bottom_wall(self):
        ball = make_ball(480, 598, vy=50)
        assert check_wall_collision(ball, 600) == 'bottom'
        assert ball.vy == -50
        assert ball.y == 590

    def test_ball_leaving_wall_is_not_a_hit(self):
        ball = make_ball(480, 595, vy=-30)
        assert check_wall_collision(ball, 600) is None
        assert ball.vy == -30
        assert ball.y == 590

    def test_resting_on_boundary_after_bounce(self):
        ball = make_ball(480, 5, vy=-100)
        assert check_wall_collision(ball, 600) == 'top'
        assert check_wall_collision(ball, 600) is None
        assert (ball.y, ball.vy) == (10, 100)

    def test_no_hit_in_middle(self):
        ball = make_ball(480, 300, vy=80)
        assert check_wall_collision(ball, 600) is None
        assert (ball.y, ball.vy) == (300, 80)


class TestPaddleCollision:
    """Test overlap detection with the direction gate."""

    def test_player_hit_when_moving_left(self, player):
        assert check_paddle_collision(make_ball(45, 300, vx=-420), player, is_left=True)

    def test_player_ignored_when_moving_right(self, player):
        assert not check_paddle_collision(make_ball(45, 300, vx=420), player, is_left=True)

    def test_cpu_hit_when_moving_right(self, cpu):
        assert check_paddle_collision(make_ball(915, 300, vx=420), cpu, is_left=False)

    def test_cpu_ignored_when_moving_left(self, cpu):
        assert not check_paddle_collision(make_ball(915, 300, vx=-420), cpu, is_left=False)

    def test_miss_above_paddle(self, player):
        assert not check_paddle_collision(make_ball(30, 200, vx=-420), player, is_left=True)


class TestBounce:
    """Test bounce angle and outgoing velocity."""

    def test_center_hit_is_flat(self):
        assert bounce_angle(0, 60) == 0

    def test_edge_hit_is_max_angle(self):
        assert bounce_angle(60, 60) == pytest.approx(MAX_BOUNCE_ANGLE)
        assert bounce_angle(-60, 60) == pytest.approx(-MAX_BOUNCE_ANGLE)

    def test_angle_clamped_past_edge(self):
        assert bounce_angle(200, 60) == pytest.approx(math.pi / 3)
        assert bounce_angle(-200, 60) == pytest.approx(-math.pi / 3)

    def test_velocity_direction(self):
        vx, vy = bounce_velocity(0.0, 500, -1)
        assert vx == pytest.approx(-500)
        assert vy == pytest.approx(0)

    def test_velocity_is_deterministic(self):
        angle = bounce_angle(23.5, 60)
        assert bounce_velocity(angle, 512.0, 1) == bounce_velocity(angle, 512.0, 1)

    def test_velocity_magnitude(self):
        vx, vy = bounce_velocity(bounce_angle(41, 60), 630, 1)
        assert math.hypot(vx, vy) == pytest.approx(630)

    def test_center_hit_on_player_paddle(self, player):
        """Center hit at base speed leaves flat at 5% more speed."""
        ball = make_ball(45, 300, vx=-420)
        speed = bounce_off_paddle(ball, player, is_left=True)
        assert speed == pytest.approx(441)
        assert ball.vx == pytest.approx(441)
        assert ball.vy == pytest.approx(0)
        assert ball.x == 48

    def test_top_edge_hit_leaves_upward(self, player):
        ball = make_ball(45, player.top, vx=-420)
        bounce_off_paddle(ball, player, is_left=True)
        assert ball.vy < 0
        assert ball.vx == pytest.approx(441 * math.cos(MAX_BOUNCE_ANGLE))

    def test_bottom_edge_hit_leaves_downward(self, player):
        ball = make_ball(45, player.bottom, vx=-420)
        bounce_off_paddle(ball, player, is_left=True)
        assert ball.vy > 0

    def test_cpu_bounce_sends_ball_left(self, cpu):
        ball = make_ball(915, 300, vx=420)
        bounce_off_paddle(ball, cpu, is_left=False)
        assert ball.vx == pytest.approx(-441)
        assert ball.x == 912

    def test_speed_capped(self, player):
        ball = make_ball(45, 300, vx=-970)
        ball.set_speed(970)
        assert bounce_off_paddle(ball, player, is_left=True) == 980
        assert ball.speed == 980


class TestScoring:
    """Test detection of a ball leaving the field."""

    def test_left_exit_scores_for_cpu(self):
        assert check_scoring(make_ball(-11, 300), 960) is Side.CPU

    def test_right_exit_scores_for_player(self):
        assert check_scoring(make_ball(971, 300), 960) is Side.PLAYER

    def test_partly_outside_is_not_a_point(self):
        assert check_scoring(make_ball(-10, 300), 960) is None
        assert check_scoring(make_ball(970, 300), 960) is None


class TestAdvanceBall:
    """Test a full physics step."""

    def test_free_flight(self, player, cpu):
        ball = make_ball(480, 300, vx=200, vy=100)
        result = advance_ball(ball, player, cpu, 960, 600, 0.05)
        assert result.events == []
        assert result.scorer is None
        assert (ball.x, ball.y) == pytest.approx((490, 305))

    def test_wall_event(self, player, cpu):
        ball = make_ball(480, 12, vx=100, vy=-400)
        result = advance_ball(ball, player, cpu, 960, 600, 0.01)
        assert result.events == [WallHitEvent(edge='top')]
        assert ball.vy == 400

    def test_player_paddle_event(self, player, cpu):
        ball = make_ball(50, 300, vx=-420)
        result = advance_ball(ball, player, cpu, 960, 600, 0.01)
        assert len(result.events) == 1
        event = result.events[0]
        assert isinstance(event, PaddleHitEvent)
        assert event.side == 'left'
        assert event.speed == pytest.approx(441)
        assert ball.vx == pytest.approx(441)
        assert ball.x == 48

    def test_cpu_paddle_event(self, player, cpu):
        ball = make_ball(910, 300, vx=420)
        result = advance_ball(ball, player, cpu, 960, 600, 0.01)
        assert [e.side for e in result.events] == ['right']
        assert ball.vx < 0

    def test_ball_past_paddle_scores(self, player, cpu):
        ball = make_ball(-9, 300, vx=-420)
        result = advance_ball(ball, player, cpu, 960, 600, 0.01)
        assert result.scorer is Side.CPU
        assert result.events == []
