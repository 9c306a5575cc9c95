"""Ball entity with velocity-based movement.

The ball keeps a scalar speed alongside its velocity vector. The speed
only grows on paddle bounces and is restored to the base speed on every
serve.
"""

from dataclasses import dataclass
import math
from typing import Tuple

from neon_pong.geometry import clamp


@dataclass(frozen=True)
class BallConfig:
    """Ball configuration."""

    radius: float = 10.0
    base_speed: float = 420.0     # Serve speed in units/second
    max_speed: float = 980.0


class Ball:
    """Ball with explicit-Euler movement."""

    def __init__(self, config: BallConfig, x: float, y: float):
        """Initialize a resting ball.

        Args:
            config: Ball configuration
            x: Center X position
            y: Center Y position
        """
        self._config = config
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self._speed = config.base_speed

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._config.radius

    @property
    def base_speed(self) -> float:
        return self._config.base_speed

    @property
    def max_speed(self) -> float:
        return self._config.max_speed

    @property
    def speed(self) -> float:
        """Get scalar speed, always within [base_speed, max_speed]."""
        return self._speed

    def set_speed(self, speed: float) -> float:
        """Set scalar speed, clamped to the configured range.

        Returns:
            The speed actually applied
        """
        self._speed = clamp(speed, self._config.base_speed, self._config.max_speed)
        return self._speed

    def set_velocity(self, vx: float, vy: float) -> None:
        self.vx = vx
        self.vy = vy

    def launch(self, angle: float, direction: int) -> None:
        """Serve from the current position at base speed.

        Args:
            angle: Launch angle in radians from horizontal (positive = down)
            direction: +1 to serve right, -1 to serve left
        """
        self._speed = self._config.base_speed
        self.vx = self._speed * math.cos(angle) * direction
        self.vy = self._speed * math.sin(angle)

    def update(self, dt: float) -> None:
        """Advance position by velocity.

        Args:
            dt: Delta time in seconds
        """
        self.x += self.vx * dt
        self.y += self.vy * dt

    def reset(self, x: float, y: float) -> None:
        """Stop the ball at (x, y) and restore base speed."""
        self.x = x
        self.y = y
        self.vx = 0.0
        self.vy = 0.0
        self._speed = self._config.base_speed

    def get_bounds(self) -> Tuple[float, float, float, float]:
        """Get ball bounding box (left, top, right, bottom)."""
        r = self._config.radius
        return (self.x - r, self.y - r, self.x + r, self.y + r)
