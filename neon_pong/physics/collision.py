"""Collision detection and response for Neon Pong.

Handles ball-wall and ball-paddle collisions and detects when the ball
has left the field past a paddle.
"""

import math
from typing import Literal, Optional, Tuple, TYPE_CHECKING

from neon_pong.config import BALL_SPEEDUP, MAX_BOUNCE_ANGLE
from neon_pong.game_state import Side
from neon_pong.geometry import circle_rect_intersects, clamp

if TYPE_CHECKING:
    from neon_pong.entities.ball import Ball
    from neon_pong.entities.paddle import Paddle


def check_wall_collision(
    ball: 'Ball',
    field_height: float,
) -> Optional[Literal['top', 'bottom']]:
    """Check and handle ball-wall collisions.

    A hit needs the ball touching a wall while still moving into it; the
    vertical velocity is then reflected. The ball is always clamped inside
    the radius-aware bounds, so one resting on the boundary after a bounce
    is not hit again.

    Args:
        ball: Ball to check (mutated)
        field_height: Playfield height

    Returns:
        'top' or 'bottom' if a wall was hit, else None
    """
    r = ball.radius
    edge: Optional[Literal['top', 'bottom']] = None
    if ball.y - r <= 0 and ball.vy < 0:
        edge = 'top'
        ball.vy = -ball.vy
    elif ball.y + r >= field_height and ball.vy > 0:
        edge = 'bottom'
        ball.vy = -ball.vy
    ball.y = clamp(ball.y, r, field_height - r)
    return edge


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle', is_left: bool) -> bool:
    """Check if ball collides with paddle.

    Only returns True if the ball is moving toward the paddle, so a ball
    that was just deflected is never resolved twice.

    Args:
        ball: Ball to check
        paddle: Paddle to check against
        is_left: True for the player's (left) paddle
    """
    if is_left and ball.vx >= 0:
        return False
    if not is_left and ball.vx <= 0:
        return False

    return circle_rect_intersects(ball.x, ball.y, ball.radius, paddle.rect)


def bounce_angle(relative_intersect: float, half_height: float) -> float:
    """Deflection angle for a hit at the given offset from paddle center.

    Args:
        relative_intersect: paddle_center_y - ball_y
        half_height: Half the paddle height

    Returns:
        Angle in radians within [-MAX_BOUNCE_ANGLE, MAX_BOUNCE_ANGLE];
        positive means the ball leaves upward
    """
    normalized = clamp(relative_intersect / half_height, -1.0, 1.0)
    return normalized * MAX_BOUNCE_ANGLE


def bounce_velocity(angle: float, speed: float, direction: int) -> Tuple[float, float]:
    """Outgoing velocity for a bounce.

    Args:
        angle: Bounce angle from bounce_angle()
        speed: Outgoing scalar speed
        direction: +1 leaving the left paddle, -1 leaving the right paddle

    Returns:
        Tuple of (vx, vy)
    """
    return (
        speed * math.cos(angle) * direction,
        speed * -math.sin(angle),
    )


def bounce_off_paddle(ball: 'Ball', paddle: 'Paddle', is_left: bool) -> float:
    """Resolve a ball-paddle hit.

    Sets angle-based velocity, speeds the ball up (capped) and places it
    flush against the paddle's outer face.

    Args:
        ball: Ball that hit the paddle (mutated)
        paddle: Paddle that was hit
        is_left: True for the player's (left) paddle

    Returns:
        The ball's new speed
    """
    angle = bounce_angle(paddle.center_y - ball.y, paddle.half_height)
    new_speed = ball.set_speed(ball.speed * BALL_SPEEDUP)
    direction = 1 if is_left else -1
    ball.set_velocity(*bounce_velocity(angle, new_speed, direction))

    if is_left:
        ball.x = paddle.right + ball.radius
    else:
        ball.x = paddle.left - ball.radius
    return new_speed


def check_scoring(ball: 'Ball', field_width: float) -> Optional[Side]:
    """Detect a ball that fully left the field.

    Returns:
        Side that won the point, or None
    """
    if ball.x < -ball.radius:
        return Side.CPU
    if ball.x > field_width + ball.radius:
        return Side.PLAYER
    return None
