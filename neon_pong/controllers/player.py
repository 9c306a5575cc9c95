"""Human player control.

Pointer input sets the paddle target directly; held up/down controls move
the target at paddle speed. The paddle itself eases toward the target a
little slower than the target can move, so it lags instead of teleporting.
"""

from typing import Optional, TYPE_CHECKING

from neon_pong.config import PLAYER_EASE, SimulationConfig
from neon_pong.input.input_event import DirectionalInput, PlayerInput, PointerInput

if TYPE_CHECKING:
    from neon_pong.entities.paddle import PlayerPaddle


class PlayerController:
    """Collects player inputs between ticks and applies them to the paddle."""

    def __init__(self, config: SimulationConfig):
        self._config = config
        self._up = False
        self._down = False
        self._pending_pointer: Optional[float] = None

    @property
    def up(self) -> bool:
        return self._up

    @property
    def down(self) -> bool:
        return self._down

    def submit(self, player_input: PlayerInput) -> None:
        """Record an input for the next tick.

        Pointer inputs overwrite each other (last one wins); directional
        inputs replace the held key state.

        Raises:
            TypeError: If player_input is not a PointerInput or DirectionalInput
        """
        if isinstance(player_input, PointerInput):
            self._pending_pointer = player_input.to_field(self._config.playfield_height)
        elif isinstance(player_input, DirectionalInput):
            self._up = player_input.up
            self._down = player_input.down
        else:
            raise TypeError(
                f'Expected PointerInput or DirectionalInput, got {type(player_input).__name__}'
            )

    def update(self, paddle: 'PlayerPaddle', dt: float) -> None:
        """Update target from inputs, then ease the paddle toward it.

        Args:
            paddle: Player paddle (mutated)
            dt: Delta time in seconds
        """
        speed = self._config.paddle_speed
        target = paddle.target_y

        if self._pending_pointer is not None:
            target = self._pending_pointer
            self._pending_pointer = None

        if self._up:
            target -= speed * dt
        elif self._down:
            target += speed * dt

        paddle.set_target(target)
        paddle.move_toward(paddle.target_y, speed * dt * PLAYER_EASE)

    def reset(self) -> None:
        """Forget held keys and pending pointer input."""
        self._up = False
        self._down = False
        self._pending_pointer = None
