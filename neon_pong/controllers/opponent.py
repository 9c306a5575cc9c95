"""Computer opponent: imperfect ball tracking.

The CPU paddle chases the ball's height plus a slowly wandering offset
(drift). Tracking weakens as the ball speeds up, so fast rallies are
where the CPU starts missing.
"""

import random
from typing import TYPE_CHECKING

from neon_pong.config import (
    DRIFT_RANGE,
    DRIFT_SMOOTHING,
    IDLE_DRIFT_DECAY,
    MIN_TRACKING,
    OPPONENT_EDGE_BUFFER,
    SimulationConfig,
)
from neon_pong.geometry import clamp, lerp, random_range

if TYPE_CHECKING:
    from neon_pong.entities.ball import Ball
    from neon_pong.entities.paddle import ComputerPaddle


def tracking_strength(ball_speed: float, max_speed: float) -> float:
    """Fraction of full paddle speed the CPU uses at a given ball speed.

    0.9 at rest, falling linearly with speed, never below MIN_TRACKING.
    """
    return max(MIN_TRACKING, 0.9 - min(ball_speed / max_speed, 0.7))


class OpponentController:
    """Drives the CPU paddle."""

    def __init__(self, config: SimulationConfig, rng: random.Random):
        """Initialize controller.

        Args:
            config: Simulation settings (paddle speed, field size, speed cap)
            rng: Random source for drift sampling
        """
        self._config = config
        self._rng = rng

    def target_center(self, paddle: 'ComputerPaddle', ball: 'Ball') -> float:
        """Center Y the CPU is aiming for this tick.

        Follows the ball (plus drift) while it approaches, otherwise
        returns to the middle. Clamped away from the field edges.
        """
        if ball.vx > 0:
            target = ball.y + paddle.drift
        else:
            target = self._config.center_y

        half = paddle.half_height
        return clamp(
            target,
            half + OPPONENT_EDGE_BUFFER,
            self._config.playfield_height - half - OPPONENT_EDGE_BUFFER,
        )

    def update(self, paddle: 'ComputerPaddle', ball: 'Ball', dt: float) -> None:
        """Move the CPU paddle toward its target and random-walk the drift.

        Args:
            paddle: CPU paddle (mutated)
            ball: Ball being tracked
            dt: Delta time in seconds
        """
        strength = tracking_strength(ball.speed, self._config.ball_max_speed)
        max_step = self._config.paddle_speed * strength * dt
        paddle.move_toward(self.target_center(paddle, ball), max_step)

        paddle.drift = lerp(
            paddle.drift,
            random_range(self._rng, -DRIFT_RANGE, DRIFT_RANGE),
            DRIFT_SMOOTHING,
        )

    def decay_drift(self, paddle: 'ComputerPaddle') -> None:
        """Ease drift back toward zero while no round is being played."""
        paddle.drift = lerp(paddle.drift, 0.0, IDLE_DRIFT_DECAY)
