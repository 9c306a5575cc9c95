"""
Player Input - Values the player controller consumes.

Uses frozen dataclasses so inputs are immutable and validated on creation;
malformed coordinates never reach the simulation.
"""
from dataclasses import dataclass
from enum import Enum
import math
from typing import Optional, Union


@dataclass(frozen=True)
class PointerInput:
    """Absolute pointer position (mouse, touch, laser).

    Attributes:
        y: Vertical pointer coordinate. In display space when display_height
            is given, otherwise already in playfield units.
        display_height: Height of the surface the pointer moved over; used to
            scale y into playfield units
    """
    y: float
    display_height: Optional[float] = None

    def __post_init__(self):
        """Validate coordinates are finite and the display has a size."""
        if not math.isfinite(self.y):
            raise ValueError(f'Pointer y must be finite, got {self.y}')
        if self.display_height is not None:
            if not math.isfinite(self.display_height) or self.display_height <= 0:
                raise ValueError(
                    f'Display height must be positive and finite, got {self.display_height}'
                )

    def to_field(self, field_height: float) -> float:
        """Convert to playfield Y."""
        if self.display_height is None:
            return self.y
        return self.y * field_height / self.display_height

    def __str__(self) -> str:
        return f"PointerInput(y={self.y:.2f}, display_height={self.display_height})"


@dataclass(frozen=True)
class DirectionalInput:
    """Held state of the up/down controls.

    Attributes:
        up: Up control is held
        down: Down control is held
    """
    up: bool = False
    down: bool = False


PlayerInput = Union[PointerInput, DirectionalInput]


class Command(Enum):
    """Lifecycle commands raised by an input source."""
    START = "start"
    RESTART = "restart"
    QUIT = "quit"
