"""Match lifecycle states and sides of the table."""
from enum import Enum


class MatchState(Enum):
    """States of a single match.

    States:
        IDLE: Before the first serve or after a restart; the ball wanders
            cosmetically and nothing can score
        RUNNING: Live simulation
        ROUND_PAUSING: Short frozen interval after a point, before the next serve
        GAME_OVER: Terminal; only restart leaves it
    """
    IDLE = "idle"
    RUNNING = "running"
    ROUND_PAUSING = "round_pausing"
    GAME_OVER = "game_over"


class Side(Enum):
    """Which competitor a point, paddle or serve belongs to.

    The player defends the left edge, the CPU the right edge.
    """
    PLAYER = "player"
    CPU = "cpu"

    @property
    def opponent(self) -> 'Side':
        """The other side."""
        return Side.CPU if self is Side.PLAYER else Side.PLAYER

    @property
    def serve_direction(self) -> int:
        """Horizontal direction (-1 left, +1 right) that sends the ball toward this side."""
        return -1 if self is Side.PLAYER else 1
