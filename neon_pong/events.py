"""
Neon Pong Frame Events

Discrete notifications produced by one simulation tick:
- WallHitEvent: Ball bounced off the top or bottom wall
- PaddleHitEvent: Ball bounced off a paddle
- ScoreChangedEvent: A side's score changed
- RoundEndedEvent: A point was won
- MatchEndedEvent: A side reached the win score

These are the contract between the simulation and renderers/UI. The
simulation never draws; it returns these values from tick().
"""

from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from neon_pong.game_state import Side


class FrameEvent(BaseModel):
    """Base class for all tick events."""
    model_config = ConfigDict(frozen=True)  # Events are immutable once created


class WallHitEvent(FrameEvent):
    """Ball reflected off a horizontal wall."""
    kind: Literal['wall_hit'] = 'wall_hit'
    edge: Literal['top', 'bottom'] = Field(..., description="Which wall was hit")


class PaddleHitEvent(FrameEvent):
    """Ball reflected off a paddle."""
    kind: Literal['paddle_hit'] = 'paddle_hit'
    side: Literal['left', 'right'] = Field(..., description="Left = player, right = CPU")
    speed: float = Field(..., gt=0, description="Ball speed after the bounce")


class ScoreChangedEvent(FrameEvent):
    """A side's score was incremented."""
    kind: Literal['score_changed'] = 'score_changed'
    side: Side
    value: int = Field(..., ge=0, description="New score for that side")


class RoundEndedEvent(FrameEvent):
    """A round (serve-to-point) finished."""
    kind: Literal['round_ended'] = 'round_ended'
    winner: Side


class MatchEndedEvent(FrameEvent):
    """A side reached the win score; the match is over."""
    kind: Literal['match_ended'] = 'match_ended'
    player_won: bool
    title: str
    message: str


AnyFrameEvent = Union[
    WallHitEvent,
    PaddleHitEvent,
    ScoreChangedEvent,
    RoundEndedEvent,
    MatchEndedEvent,
]

FrameEvents = List[AnyFrameEvent]
