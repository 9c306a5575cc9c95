"""
Neon Pong.

Player-versus-CPU Pong simulation core. Provides:
- simulation: Simulation context with the per-frame tick
- match: Match state machine (idle, running, round pause, game over)
- physics: Ball integration, wall/paddle collisions, bounce angles
- controllers: Player input mapping and the CPU tracking heuristic
- events: Values returned from tick() for renderers and UIs
- config: Validated settings and rule constants
- skins / input.sources: Optional pygame renderer and input source

Functional interface:
    import neon_pong

    sim = neon_pong.init({'winScore': 5, 'seed': 7})
    neon_pong.start(sim)
    events = neon_pong.tick(sim, 1 / 60)
    neon_pong.submit_player_input(sim, neon_pong.PointerInput(y=240.0))
    frame = neon_pong.snapshot(sim)
"""

from typing import Any

from neon_pong.config import ConfigSource, ConfigurationError, SimulationConfig, build_config, load_config
from neon_pong.events import (
    AnyFrameEvent,
    FrameEvent,
    FrameEvents,
    MatchEndedEvent,
    PaddleHitEvent,
    RoundEndedEvent,
    ScoreChangedEvent,
    WallHitEvent,
)
from neon_pong.game_state import MatchState, Side
from neon_pong.input.input_event import DirectionalInput, PlayerInput, PointerInput
from neon_pong.models import SimulationSnapshot
from neon_pong.simulation import Simulation

__version__ = "1.0.0"


def init(config: ConfigSource = None, **overrides: Any) -> Simulation:
    """Create a simulation handle.

    Raises:
        ConfigurationError: If settings are out of range
    """
    return Simulation(config, **overrides)


def tick(handle: Simulation, dt: float) -> FrameEvents:
    """Advance the simulation by dt seconds and return the frame's events."""
    return handle.tick(dt)


def submit_player_input(handle: Simulation, player_input: PlayerInput) -> None:
    """Queue player input for the next tick (last writer wins)."""
    handle.submit_player_input(player_input)


def start(handle: Simulation) -> bool:
    """Start the match if it is idle."""
    return handle.start()


def restart(handle: Simulation) -> None:
    """Zero the score and return to idle."""
    handle.restart()


def snapshot(handle: Simulation) -> SimulationSnapshot:
    """Read-only view of the current frame."""
    return handle.snapshot()


__all__ = [
    'init',
    'tick',
    'submit_player_input',
    'start',
    'restart',
    'snapshot',
    'Simulation',
    'SimulationConfig',
    'SimulationSnapshot',
    'ConfigurationError',
    'build_config',
    'load_config',
    'MatchState',
    'Side',
    'PointerInput',
    'DirectionalInput',
    'PlayerInput',
    'FrameEvent',
    'AnyFrameEvent',
    'FrameEvents',
    'WallHitEvent',
    'PaddleHitEvent',
    'ScoreChangedEvent',
    'RoundEndedEvent',
    'MatchEndedEvent',
]
