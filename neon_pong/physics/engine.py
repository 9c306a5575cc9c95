"""One physics step: move the ball and resolve what it touched."""

from dataclasses import dataclass, field
from typing import List, Optional, TYPE_CHECKING

from neon_pong.events import AnyFrameEvent, PaddleHitEvent, WallHitEvent
from neon_pong.game_state import Side
from neon_pong.logging import get_logger

from .collision import (
    bounce_off_paddle,
    check_paddle_collision,
    check_scoring,
    check_wall_collision,
)

if TYPE_CHECKING:
    from neon_pong.entities.ball import Ball
    from neon_pong.entities.paddle import Paddle

log = get_logger('physics')


@dataclass
class PhysicsResult:
    """What happened during one ball step.

    Attributes:
        events: Wall and paddle hit events, in order
        scorer: Side that won the point if the ball left the field
    """
    events: List[AnyFrameEvent] = field(default_factory=list)
    scorer: Optional[Side] = None


def advance_ball(
    ball: 'Ball',
    player: 'Paddle',
    cpu: 'Paddle',
    field_width: float,
    field_height: float,
    dt: float,
) -> PhysicsResult:
    """Integrate the ball by one step and resolve collisions.

    Single explicit-Euler step; dt must already be capped by the caller.

    Args:
        ball: Ball to move (mutated)
        player: Left paddle
        cpu: Right paddle
        field_width: Playfield width
        field_height: Playfield height
        dt: Delta time in seconds

    Returns:
        PhysicsResult with hit events and the scoring side, if any
    """
    result = PhysicsResult()
    ball.update(dt)

    edge = check_wall_collision(ball, field_height)
    if edge is not None:
        result.events.append(WallHitEvent(edge=edge))

    # At most one paddle per step, chosen by travel direction
    if check_paddle_collision(ball, player, is_left=True):
        speed = bounce_off_paddle(ball, player, is_left=True)
        result.events.append(PaddleHitEvent(side='left', speed=speed))
        log.trace("Player paddle hit, speed %.1f", speed)
    elif check_paddle_collision(ball, cpu, is_left=False):
        speed = bounce_off_paddle(ball, cpu, is_left=False)
        result.events.append(PaddleHitEvent(side='right', speed=speed))
        log.trace("CPU paddle hit, speed %.1f", speed)

    result.scorer = check_scoring(ball, field_width)
    return result
