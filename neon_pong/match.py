"""Match state machine.

Owns the score and the lifecycle:

    IDLE --start--> RUNNING --point--> ROUND_PAUSING --0.7s--> RUNNING
                       |
                       +--winning point--> GAME_OVER --restart--> IDLE

restart() is accepted from any state. The round pause is a resume time
checked by advance(), so the transition happens inside a regular tick.
"""

import math
import random
from typing import List, Optional, Tuple

from neon_pong.config import (
    IDLE_FOLLOW_RATE,
    IDLE_WANDER_X,
    IDLE_WANDER_Y,
    ROUND_PAUSE,
    SERVE_ANGLE,
    SimulationConfig,
)
from neon_pong.entities.ball import Ball
from neon_pong.entities.paddle import ComputerPaddle, PlayerPaddle
from neon_pong.entities.score import Score
from neon_pong.events import (
    AnyFrameEvent,
    MatchEndedEvent,
    RoundEndedEvent,
    ScoreChangedEvent,
)
from neon_pong.game_state import MatchState, Side
from neon_pong.geometry import lerp, random_range
from neon_pong.logging import emit_record, get_logger

log = get_logger('match')

INTRO_TITLE = "Neon Pong"
INTRO_MESSAGE = "Move your paddle with the mouse or arrow keys. First to {win_score} points wins."
VICTORY_TITLE = "Victory!"
VICTORY_MESSAGE = "You dominated the arena. Click play to run it back."
DEFEAT_TITLE = "CPU Wins"
DEFEAT_MESSAGE = "The CPU outplayed you this time. Study the angles and try again!"


class MatchStateMachine:
    """Scores points and moves the match between states."""

    def __init__(
        self,
        config: SimulationConfig,
        ball: Ball,
        player: PlayerPaddle,
        cpu: ComputerPaddle,
        rng: random.Random,
    ):
        """Initialize an idle match.

        Args:
            config: Simulation settings
            ball: Shared ball (reset in place between rounds)
            player: Player paddle
            cpu: CPU paddle
            rng: Random source for serve direction and angle
        """
        self._config = config
        self._ball = ball
        self._player = player
        self._cpu = cpu
        self._rng = rng

        self._state = MatchState.IDLE
        self._score = Score()
        self._winner: Optional[Side] = None
        self._serve_direction = 1
        self._resume_at: Optional[float] = None

    @property
    def state(self) -> MatchState:
        return self._state

    @property
    def score(self) -> Score:
        return self._score

    @property
    def winner(self) -> Optional[Side]:
        """Side that won the match, or None while it is undecided."""
        return self._winner

    @property
    def serve_direction(self) -> int:
        """Direction of the next (or current) serve: -1 left, +1 right."""
        return self._serve_direction

    @property
    def resume_at(self) -> Optional[float]:
        """Clock time at which a paused round resumes."""
        return self._resume_at

    @property
    def is_live(self) -> bool:
        """True while ball and paddles are being simulated."""
        return self._state is MatchState.RUNNING

    @property
    def overlay(self) -> Optional[Tuple[str, str]]:
        """Title and message a UI should show, or None during play."""
        if self._state is MatchState.IDLE:
            return INTRO_TITLE, INTRO_MESSAGE.format(win_score=self._config.win_score)
        if self._state is MatchState.GAME_OVER:
            return self._end_text(self._winner is Side.PLAYER)
        return None

    # =========================================================================
    # Transitions
    # =========================================================================

    def start(self) -> bool:
        """Serve the first ball of a match.

        Returns:
            True if the match started, False if not idle
        """
        if self._state is not MatchState.IDLE:
            log.debug("Ignoring start while %s", self._state.value)
            return False

        self._serve_direction = 1 if self._rng.random() > 0.5 else -1
        self.reset_round(self._serve_direction)
        self._state = MatchState.RUNNING
        log.info("Match started, serving %s", 'right' if self._serve_direction > 0 else 'left')
        emit_record('match', {'type': 'start', 'direction': self._serve_direction})
        return True

    def restart(self) -> None:
        """Abandon the current match and return to idle with zero scores.

        Cancels any pending round resume. Calling it repeatedly leaves the
        same state.
        """
        self._score.reset()
        self._winner = None
        self._resume_at = None
        self._state = MatchState.IDLE
        self._ball.reset(self._config.center_x, self._config.center_y)
        self._player.reset()
        self._cpu.reset()
        log.info("Match restarted")
        emit_record('match', {'type': 'restart'})

    def award_point(self, side: Side, clock: float) -> List[AnyFrameEvent]:
        """Give a point to side and decide what happens next.

        Ignored unless a round is running, so a finished match can never
        change score.

        Args:
            side: Side that won the point
            clock: Current simulation time in seconds

        Returns:
            Events describing the point
        """
        if self._state is not MatchState.RUNNING:
            log.debug("Ignoring point for %s while %s", side.value, self._state.value)
            return []

        value = self._score.award(side)
        events: List[AnyFrameEvent] = [
            ScoreChangedEvent(side=side, value=value),
            RoundEndedEvent(winner=side),
        ]
        log.info("Point to %s (%d-%d)", side.value, self._score.player, self._score.cpu)
        emit_record('match', {
            'type': 'point',
            'side': side.value,
            'player': self._score.player,
            'cpu': self._score.cpu,
            'clock': clock,
        })

        if self._score.leader_at(self._config.win_score) is not None:
            events.append(self._end_match(side))
            return events

        # Next serve goes toward the side that lost the point
        self._serve_direction = side.opponent.serve_direction
        self._resume_at = clock + ROUND_PAUSE
        self._state = MatchState.ROUND_PAUSING
        return events

    def advance(self, clock: float) -> bool:
        """Resume a paused round once its delay has elapsed.

        Args:
            clock: Current simulation time in seconds

        Returns:
            True if play resumed on this call
        """
        if self._state is not MatchState.ROUND_PAUSING or self._resume_at is None:
            return False
        if clock < self._resume_at:
            return False

        self._resume_at = None
        self.reset_round(self._serve_direction)
        self._state = MatchState.RUNNING
        log.debug("Round resumed")
        return True

    def _end_match(self, winner: Side) -> MatchEndedEvent:
        """Freeze the match with winner as champion."""
        self._winner = winner
        self._resume_at = None
        self._state = MatchState.GAME_OVER
        player_won = winner is Side.PLAYER
        title, message = self._end_text(player_won)
        log.info("Match over: %s (%d-%d)", title, self._score.player, self._score.cpu)
        emit_record('match', {
            'type': 'match_ended',
            'winner': winner.value,
            'player': self._score.player,
            'cpu': self._score.cpu,
        })
        return MatchEndedEvent(player_won=player_won, title=title, message=message)

    @staticmethod
    def _end_text(player_won: bool) -> Tuple[str, str]:
        if player_won:
            return VICTORY_TITLE, VICTORY_MESSAGE
        return DEFEAT_TITLE, DEFEAT_MESSAGE

    # =========================================================================
    # Round setup
    # =========================================================================

    def reset_round(self, direction: int) -> None:
        """Center everything and serve at base speed.

        Args:
            direction: +1 to serve toward the CPU, -1 toward the player
        """
        self._ball.reset(self._config.center_x, self._config.center_y)
        angle = random_range(self._rng, -SERVE_ANGLE, SERVE_ANGLE)
        self._ball.launch(angle, direction)
        self._player.reset()
        self._cpu.reset()

    def update_idle(self, clock: float, dt: float) -> None:
        """Cosmetic ball wander shown before a match starts.

        No collisions or scoring; the ball eases toward a point that
        sways around the field center.
        """
        wobble = math.sin(clock / 0.6) * 0.25
        target_x = self._config.center_x + math.sin(clock) * IDLE_WANDER_X
        target_y = self._config.center_y + wobble * IDLE_WANDER_Y
        t = min(dt * IDLE_FOLLOW_RATE, 1.0)
        self._ball.x = lerp(self._ball.x, target_x, t)
        self._ball.y = lerp(self._ball.y, target_y, t)
