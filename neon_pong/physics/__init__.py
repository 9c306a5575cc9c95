"""Neon Pong physics and collision detection."""

from .collision import (
    check_wall_collision,
    check_paddle_collision,
    bounce_angle,
    bounce_velocity,
    bounce_off_paddle,
    check_scoring,
)
from .engine import PhysicsResult, advance_ball

__all__ = [
    'check_wall_collision',
    'check_paddle_collision',
    'bounce_angle',
    'bounce_velocity',
    'bounce_off_paddle',
    'check_scoring',
    'PhysicsResult',
    'advance_ball',
]
