"""Paddle entities.

Paddles move vertically only; x is fixed per side. Position is the
top-left corner, matching the rectangle a renderer draws.
"""

from typing import Tuple

from neon_pong.geometry import clamp, step_toward


class Paddle:
    """Vertically moving paddle kept inside the playfield."""

    def __init__(
        self,
        x: float,
        width: float,
        height: float,
        field_height: float,
    ):
        """Initialize paddle centered vertically.

        Args:
            x: Left edge X (fixed for the paddle's lifetime)
            width: Paddle width
            height: Paddle height
            field_height: Playfield height used for bounds
        """
        self._x = x
        self._width = width
        self._height = height
        self._field_height = field_height
        self._y = field_height / 2 - height / 2

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def y(self) -> float:
        """Get paddle top Y."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def half_height(self) -> float:
        return self._height / 2

    @property
    def center_y(self) -> float:
        """Get paddle center Y."""
        return self._y + self._height / 2

    @property
    def top(self) -> float:
        return self._y

    @property
    def bottom(self) -> float:
        return self._y + self._height

    @property
    def left(self) -> float:
        return self._x

    @property
    def right(self) -> float:
        return self._x + self._width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def set_center(self, center_y: float) -> None:
        """Place the paddle center, keeping the paddle on the field."""
        self._y = clamp(
            center_y - self.half_height,
            0.0,
            self._field_height - self._height,
        )

    def move_toward(self, center_y: float, max_step: float) -> None:
        """Move the paddle center toward center_y by at most max_step.

        Args:
            center_y: Desired center Y
            max_step: Largest movement allowed this tick
        """
        self.set_center(step_toward(self.center_y, center_y, max_step))

    def reset(self) -> None:
        """Center the paddle vertically."""
        self._y = self._field_height / 2 - self._height / 2


class PlayerPaddle(Paddle):
    """Human paddle that eases toward a target center.

    The target is where the player wants the paddle CENTER to be; the
    controller moves the real position toward it each tick.
    """

    def __init__(self, x: float, width: float, height: float, field_height: float):
        super().__init__(x, width, height, field_height)
        self._target_y = field_height / 2

    @property
    def target_y(self) -> float:
        """Get target center Y."""
        return self._target_y

    def set_target(self, target_y: float) -> None:
        """Set new target for the paddle center, clamped so the paddle stays on field.

        Args:
            target_y: Target Y coordinate for paddle center
        """
        self._target_y = clamp(
            target_y,
            self.half_height,
            self._field_height - self.half_height,
        )

    def reset(self) -> None:
        """Center the paddle and its target."""
        super().reset()
        self._target_y = self._field_height / 2


class ComputerPaddle(Paddle):
    """CPU paddle with a slowly wandering aim offset (drift)."""

    def __init__(self, x: float, width: float, height: float, field_height: float):
        super().__init__(x, width, height, field_height)
        self.drift = 0.0

    def reset(self) -> None:
        """Center the paddle and clear its drift."""
        super().reset()
        self.drift = 0.0
