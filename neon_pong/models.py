"""
Read-only snapshot models.

Renderers and UIs read the simulation through these frozen copies; they
never hold references to the live entities.
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from neon_pong.game_state import MatchState, Side


class BallSnapshot(BaseModel):
    """Ball position and motion at the end of a tick."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    vx: float
    vy: float
    speed: float = Field(..., gt=0)
    radius: float = Field(..., gt=0)


class PaddleSnapshot(BaseModel):
    """Paddle rectangle (top-left corner, size)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    @computed_field
    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Return (x, y, width, height) for drawing."""
        return (self.x, self.y, self.width, self.height)


class ScoreSnapshot(BaseModel):
    """Points for each side."""
    model_config = ConfigDict(frozen=True)

    player: int = Field(default=0, ge=0)
    cpu: int = Field(default=0, ge=0)


class SimulationSnapshot(BaseModel):
    """Everything a renderer needs to draw one frame.

    Attributes:
        state: Current match state
        clock: Simulation time in seconds
        field_width: Playfield width
        field_height: Playfield height
        ball: Ball state
        player: Left paddle
        cpu: Right paddle
        score: Current score
        winner: Match winner once the match is over
        overlay: (title, message) to display, or None during play
    """
    model_config = ConfigDict(frozen=True)

    state: MatchState
    clock: float = Field(..., ge=0)
    field_width: float
    field_height: float
    ball: BallSnapshot
    player: PaddleSnapshot
    cpu: PaddleSnapshot
    score: ScoreSnapshot
    winner: Optional[Side] = None
    overlay: Optional[Tuple[str, str]] = None
