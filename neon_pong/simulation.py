"""Simulation context and the per-frame update step.

A Simulation owns every piece of mutable state for one session: ball,
paddles, controllers, match state machine, clock and random source.
Nothing is shared between instances.
"""

import math
import random
from typing import Any

from neon_pong.config import (
    BALL_RADIUS,
    MAX_TIME_STEP,
    PADDLE_MARGIN,
    PADDLE_WIDTH,
    ConfigSource,
    SimulationConfig,
    build_config,
)
from neon_pong.controllers.opponent import OpponentController
from neon_pong.controllers.player import PlayerController
from neon_pong.entities.ball import Ball, BallConfig
from neon_pong.entities.paddle import ComputerPaddle, PlayerPaddle
from neon_pong.events import FrameEvents
from neon_pong.game_state import MatchState
from neon_pong.geometry import clamp
from neon_pong.input.input_event import PlayerInput
from neon_pong.logging import get_logger
from neon_pong.match import MatchStateMachine
from neon_pong.models import (
    BallSnapshot,
    PaddleSnapshot,
    ScoreSnapshot,
    SimulationSnapshot,
)
from neon_pong.physics.engine import advance_ball

log = get_logger('simulation')


class Simulation:
    """One Pong session: human on the left, CPU on the right.

    Usage:
        sim = Simulation(SimulationConfig(seed=42))
        sim.start()
        while True:
            events = sim.tick(dt)
            frame = sim.snapshot()
    """

    def __init__(self, config: ConfigSource = None, **overrides: Any):
        """Create the session.

        Args:
            config: SimulationConfig, mapping of settings, or None for defaults
            **overrides: Individual settings applied on top of config

        Raises:
            ConfigurationError: If settings are out of range
        """
        self._config: SimulationConfig = build_config(config, **overrides)
        cfg = self._config
        self._rng = random.Random(cfg.seed)
        self._clock = 0.0

        self._ball = Ball(
            BallConfig(
                radius=BALL_RADIUS,
                base_speed=cfg.ball_base_speed,
                max_speed=cfg.ball_max_speed,
            ),
            cfg.center_x,
            cfg.center_y,
        )
        self._player = PlayerPaddle(
            PADDLE_MARGIN,
            PADDLE_WIDTH,
            cfg.paddle_height,
            cfg.playfield_height,
        )
        self._cpu = ComputerPaddle(
            cfg.playfield_width - PADDLE_MARGIN - PADDLE_WIDTH,
            PADDLE_WIDTH,
            cfg.cpu_paddle_height,
            cfg.playfield_height,
        )

        self._player_controller = PlayerController(cfg)
        self._opponent = OpponentController(cfg, self._rng)
        self._match = MatchStateMachine(cfg, self._ball, self._player, self._cpu, self._rng)

        log.debug(
            "Simulation created: field %gx%g, win score %d, seed %s",
            cfg.playfield_width, cfg.playfield_height, cfg.win_score, cfg.seed,
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def state(self) -> MatchState:
        return self._match.state

    @property
    def clock(self) -> float:
        """Seconds of real time fed to tick() so far."""
        return self._clock

    @property
    def ball(self) -> BallSnapshot:
        b = self._ball
        return BallSnapshot(x=b.x, y=b.y, vx=b.vx, vy=b.vy, speed=b.speed, radius=b.radius)

    @property
    def player_paddle(self) -> PaddleSnapshot:
        return self._paddle_snapshot(self._player)

    @property
    def cpu_paddle(self) -> PaddleSnapshot:
        return self._paddle_snapshot(self._cpu)

    @property
    def score(self) -> ScoreSnapshot:
        return ScoreSnapshot(player=self._match.score.player, cpu=self._match.score.cpu)

    @property
    def match(self) -> MatchStateMachine:
        return self._match

    @staticmethod
    def _paddle_snapshot(paddle) -> PaddleSnapshot:
        return PaddleSnapshot(x=paddle.x, y=paddle.y, width=paddle.width, height=paddle.height)

    def snapshot(self) -> SimulationSnapshot:
        """Frozen copy of everything a renderer needs."""
        return SimulationSnapshot(
            state=self._match.state,
            clock=self._clock,
            field_width=self._config.playfield_width,
            field_height=self._config.playfield_height,
            ball=self.ball,
            player=self.player_paddle,
            cpu=self.cpu_paddle,
            score=self.score,
            winner=self._match.winner,
            overlay=self._match.overlay,
        )

    # =========================================================================
    # Commands
    # =========================================================================

    def submit_player_input(self, player_input: PlayerInput) -> None:
        """Queue player input for the next tick.

        Raises:
            TypeError: If player_input is not a player input value
        """
        self._player_controller.submit(player_input)

    def start(self) -> bool:
        """Start the match if idle. Returns True if it started."""
        return self._match.start()

    def restart(self) -> None:
        """Zero the score and return to idle from any state."""
        self._player_controller.reset()
        self._match.restart()

    # =========================================================================
    # Update step
    # =========================================================================

    def tick(self, dt: float) -> FrameEvents:
        """Advance the simulation by one frame.

        The clock advances by the raw dt (round pauses are measured in real
        time); integration uses dt capped at MAX_TIME_STEP.

        Args:
            dt: Seconds since the previous tick

        Returns:
            Events emitted during this tick, in order
        """
        if not math.isfinite(dt) or dt < 0:
            log.warning("Ignoring invalid time step %r", dt)
            dt = 0.0

        self._clock += dt
        step = clamp(dt, 0.0, MAX_TIME_STEP)
        state = self._match.state

        if state is MatchState.IDLE:
            self._match.update_idle(self._clock, step)
            self._opponent.decay_drift(self._cpu)
            return []

        if state is MatchState.ROUND_PAUSING:
            self._match.advance(self._clock)
            return []

        if state is MatchState.GAME_OVER:
            return []

        return self._update_running(step)

    def _update_running(self, dt: float) -> FrameEvents:
        """Controllers, then physics, then scoring."""
        cfg = self._config
        self._player_controller.update(self._player, dt)
        self._opponent.update(self._cpu, self._ball, dt)

        result = advance_ball(
            self._ball,
            self._player,
            self._cpu,
            cfg.playfield_width,
            cfg.playfield_height,
            dt,
        )
        events: FrameEvents = list(result.events)

        if result.scorer is not None:
            events.extend(self._match.award_point(result.scorer, self._clock))

        return events
