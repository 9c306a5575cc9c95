"""Configuration for Neon Pong.

Contains playfield dimensions, physics constants, rule constants and the
validated SimulationConfig model.
"""
import math
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel, to_snake

from neon_pong.logging import get_logger

log = get_logger('config')

# Load .env from package directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Playfield (simulation units, not screen pixels)
PLAYFIELD_WIDTH: int = _get_int('NEON_PONG_PLAYFIELD_WIDTH', 960)
PLAYFIELD_HEIGHT: int = _get_int('NEON_PONG_PLAYFIELD_HEIGHT', 600)

# Paddles
PADDLE_SPEED: float = _get_float('NEON_PONG_PADDLE_SPEED', 540.0)  # units/second
PADDLE_WIDTH: float = 14.0
PADDLE_HEIGHT: float = 120.0
PADDLE_MIN_HEIGHT: float = 90.0
PADDLE_MAX_HEIGHT: float = 160.0
PADDLE_MARGIN: float = 24.0           # Gap between field edge and paddle
CPU_HEIGHT_REDUCTION: float = 40.0    # CPU paddle is shorter than the player's
PLAYER_EASE: float = 0.9              # Paddle eases slightly slower than target moves

# Ball
BALL_RADIUS: float = 10.0
BALL_BASE_SPEED: float = 420.0
BALL_MAX_SPEED: float = 980.0
BALL_SPEEDUP: float = 1.05            # Per paddle hit
MAX_BOUNCE_ANGLE: float = math.pi / 3
SERVE_ANGLE: float = math.pi / 4

# Opponent heuristic
OPPONENT_EDGE_BUFFER: float = 16.0
DRIFT_RANGE: float = 40.0
DRIFT_SMOOTHING: float = 0.005
IDLE_DRIFT_DECAY: float = 0.03
MIN_TRACKING: float = 0.2

# Idle wander
IDLE_WANDER_X: float = 80.0
IDLE_WANDER_Y: float = 120.0
IDLE_FOLLOW_RATE: float = 2.5

# Timing
MAX_TIME_STEP: float = 0.05           # Ceiling for one integration step (seconds)
ROUND_PAUSE: float = 0.7              # Frozen interval after a point (seconds)

# Rules
WIN_SCORE: int = _get_int('NEON_PONG_WIN_SCORE', 7)


class ConfigurationError(ValueError):
    """Raised when simulation settings would break the match rules."""
    pass


class SimulationConfig(BaseModel):
    """Validated simulation settings.

    Accepts snake_case field names or their camelCase aliases
    (``paddleSpeed``, ``ballBaseSpeed``, ...).

    Attributes:
        paddle_speed: Paddle speed in units/second
        paddle_height: Player paddle height (CPU paddle is 40 units shorter)
        paddle_min_height: Lower bound for paddle_height
        paddle_max_height: Upper bound for paddle_height
        ball_base_speed: Serve speed, restored every round
        ball_max_speed: Speed cap for paddle speed-ups
        win_score: Points needed to win the match
        playfield_width: Playfield width
        playfield_height: Playfield height
        seed: Seed for serve angles and opponent drift (None = nondeterministic)
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra='forbid',
        allow_inf_nan=False,
    )

    paddle_speed: float = Field(default=PADDLE_SPEED, gt=0)
    paddle_height: float = Field(default=PADDLE_HEIGHT, gt=0)
    paddle_min_height: float = Field(default=PADDLE_MIN_HEIGHT, gt=0)
    paddle_max_height: float = Field(default=PADDLE_MAX_HEIGHT, gt=0)
    ball_base_speed: float = Field(default=BALL_BASE_SPEED, gt=0)
    ball_max_speed: float = Field(default=BALL_MAX_SPEED, gt=0)
    win_score: int = Field(default=WIN_SCORE, gt=0)
    playfield_width: float = Field(default=PLAYFIELD_WIDTH, gt=0)
    playfield_height: float = Field(default=PLAYFIELD_HEIGHT, gt=0)
    seed: Optional[int] = None

    @model_validator(mode='after')
    def _check_consistency(self) -> 'SimulationConfig':
        """Reject settings that cannot produce a playable match."""
        if self.paddle_min_height > self.paddle_max_height:
            raise ValueError(
                f'paddle_min_height ({self.paddle_min_height}) exceeds '
                f'paddle_max_height ({self.paddle_max_height})'
            )
        if not self.paddle_min_height <= self.paddle_height <= self.paddle_max_height:
            raise ValueError(
                f'paddle_height must be within [{self.paddle_min_height}, '
                f'{self.paddle_max_height}], got {self.paddle_height}'
            )
        if self.ball_base_speed > self.ball_max_speed:
            raise ValueError(
                f'ball_base_speed ({self.ball_base_speed}) exceeds '
                f'ball_max_speed ({self.ball_max_speed})'
            )
        if self.cpu_paddle_height <= 0:
            raise ValueError(
                f'paddle_height must exceed {CPU_HEIGHT_REDUCTION} '
                f'so the CPU paddle has a positive height'
            )
        if self.cpu_paddle_height + 2 * OPPONENT_EDGE_BUFFER > self.playfield_height:
            raise ValueError('CPU paddle does not fit the playfield height')
        if self.paddle_height > self.playfield_height:
            raise ValueError('Player paddle does not fit the playfield height')
        if 2 * (PADDLE_MARGIN + PADDLE_WIDTH + BALL_RADIUS) >= self.playfield_width:
            raise ValueError('Playfield is too narrow for both paddles')
        if 2 * BALL_RADIUS >= self.playfield_height:
            raise ValueError('Playfield is too short for the ball')
        return self

    @property
    def cpu_paddle_height(self) -> float:
        """Fixed reduced height of the CPU paddle."""
        return self.paddle_height - CPU_HEIGHT_REDUCTION

    @property
    def center_y(self) -> float:
        """Vertical center of the playfield."""
        return self.playfield_height / 2

    @property
    def center_x(self) -> float:
        """Horizontal center of the playfield."""
        return self.playfield_width / 2


ConfigSource = Union[SimulationConfig, Mapping[str, Any], None]


def build_config(source: ConfigSource = None, **overrides: Any) -> SimulationConfig:
    """Build a validated config from a model, a mapping, or defaults.

    Args:
        source: Existing config, dict of settings (snake_case or camelCase),
            or None for defaults
        **overrides: Individual settings applied on top of source

    Returns:
        Validated SimulationConfig

    Raises:
        ConfigurationError: If any setting is out of range
    """
    if isinstance(source, SimulationConfig):
        values: Dict[str, Any] = source.model_dump()
    elif source is None:
        values = {}
    elif isinstance(source, Mapping):
        values = {to_snake(str(k)): v for k, v in source.items()}
    else:
        raise ConfigurationError(
            f'Config must be a SimulationConfig or a mapping, got {type(source).__name__}'
        )
    # Same key space for source and overrides so overrides always win
    values.update({to_snake(k): v for k, v in overrides.items()})

    try:
        return SimulationConfig(**values)
    except ValidationError as e:
        log.error("Rejected configuration: %s", e.errors()[0].get('msg', str(e)))
        raise ConfigurationError(str(e)) from e


def load_config(path: Union[str, Path], **overrides: Any) -> SimulationConfig:
    """Load a config from a YAML file.

    Args:
        path: Path to YAML file with a flat mapping of settings
        **overrides: Settings applied on top of the file

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not a mapping or values are invalid
    """
    path = Path(path)
    with open(path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    log.info("Loaded config from %s", path)
    return build_config(data, **overrides)
