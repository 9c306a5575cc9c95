"""Match score tracking."""

from dataclasses import dataclass
from typing import Optional

from neon_pong.game_state import Side


@dataclass
class Score:
    """Points for each side of one match.

    Attributes:
        player: Points won by the human player
        cpu: Points won by the computer
    """
    player: int = 0
    cpu: int = 0

    def __post_init__(self):
        """Validate scores are non-negative."""
        if self.player < 0 or self.cpu < 0:
            raise ValueError(
                f'Scores must be non-negative, got player={self.player} cpu={self.cpu}'
            )

    def get(self, side: Side) -> int:
        """Get the score for a side."""
        return self.player if side is Side.PLAYER else self.cpu

    def award(self, side: Side) -> int:
        """Add one point to a side.

        Returns:
            The side's new score
        """
        if side is Side.PLAYER:
            self.player += 1
        else:
            self.cpu += 1
        return self.get(side)

    def leader_at(self, threshold: int) -> Optional[Side]:
        """Return the side that has reached threshold, if any."""
        if self.player >= threshold:
            return Side.PLAYER
        if self.cpu >= threshold:
            return Side.CPU
        return None

    def reset(self) -> None:
        self.player = 0
        self.cpu = 0
