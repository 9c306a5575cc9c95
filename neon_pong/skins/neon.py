"""Neon skin - glowing paddles and ball on a dark arena."""

from typing import Dict, Iterable, Optional, Tuple

import pygame

from neon_pong.events import AnyFrameEvent, PaddleHitEvent, WallHitEvent
from neon_pong.models import BallSnapshot, PaddleSnapshot, SimulationSnapshot

from .base import PongSkin

Color = Tuple[int, int, int]


class NeonSkin(PongSkin):
    """Renders the arena with translucent neon shapes.

    - Field: dashed center line
    - Ball: white circle inside a soft blue halo
    - Paddles: dark fill, colored outline and tint (blue player, magenta CPU)
    - Edges: brief glow where the ball hit a wall or paddle
    """

    NAME = "neon"
    DESCRIPTION = "Glowing shapes on a dark arena"

    BACKGROUND_COLOR: Color = (5, 10, 24)
    PLAYER_COLOR: Color = (91, 194, 255)
    CPU_COLOR: Color = (255, 77, 255)
    BALL_COLOR: Color = (255, 255, 255)
    PADDLE_FILL: Tuple[int, int, int, int] = (6, 15, 36, 166)
    HUD_COLOR: Color = (220, 235, 255)

    SEGMENT_HEIGHT = 24
    SEGMENT_GAP = 18
    GLOW_RADIUS = 24
    PULSE_DURATION = 0.14  # seconds
    PULSE_THICKNESS = 6

    def __init__(self):
        """Initialize neon skin."""
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._pulses: Dict[str, float] = {}  # edge -> seconds remaining
        self._sx = 1.0
        self._sy = 1.0

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 56)
            self._small_font = pygame.font.Font(None, 28)

    @staticmethod
    def _scale(frame: SimulationSnapshot, screen: pygame.Surface) -> Tuple[float, float]:
        """Playfield-to-screen scale factors."""
        width, height = screen.get_size()
        return width / frame.field_width, height / frame.field_height

    @property
    def active_pulses(self) -> Dict[str, float]:
        """Edges currently glowing and their remaining time."""
        return dict(self._pulses)

    # =========================================================================
    # Events and animation
    # =========================================================================

    def on_events(self, events: Iterable[AnyFrameEvent]) -> None:
        """Start edge pulses for wall and paddle hits."""
        for event in events:
            if isinstance(event, WallHitEvent):
                self._pulses[event.edge] = self.PULSE_DURATION
            elif isinstance(event, PaddleHitEvent):
                self._pulses[event.side] = self.PULSE_DURATION

    def update(self, dt: float) -> None:
        """Fade pulses."""
        for edge in list(self._pulses):
            remaining = self._pulses[edge] - dt
            if remaining <= 0:
                del self._pulses[edge]
            else:
                self._pulses[edge] = remaining

    # =========================================================================
    # Drawing
    # =========================================================================

    def render(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render a frame, keeping the scale for entity drawing."""
        self._sx, self._sy = self._scale(frame, screen)
        super().render(frame, screen)

    def render_field(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        screen.fill(self.BACKGROUND_COLOR)
        width, height = screen.get_size()
        sy = height / frame.field_height

        layer = pygame.Surface((width, height), pygame.SRCALPHA)
        line_color = (*self.PLAYER_COLOR, 64)
        x = width / 2 - 2
        y = float(self.SEGMENT_GAP)
        while y < frame.field_height - self.SEGMENT_HEIGHT:
            pygame.draw.rect(layer, line_color, (x, y * sy, 4, self.SEGMENT_HEIGHT * sy))
            y += self.SEGMENT_HEIGHT + self.SEGMENT_GAP

        for edge, remaining in self._pulses.items():
            alpha = int(200 * remaining / self.PULSE_DURATION)
            color = self.CPU_COLOR if edge == 'right' else self.PLAYER_COLOR
            pygame.draw.rect(layer, (*color, alpha), self._pulse_rect(edge, width, height))

        screen.blit(layer, (0, 0))

    def _pulse_rect(self, edge: str, width: int, height: int) -> Tuple[int, int, int, int]:
        t = self.PULSE_THICKNESS
        if edge == 'top':
            return (0, 0, width, t)
        if edge == 'bottom':
            return (0, height - t, width, t)
        if edge == 'left':
            return (0, 0, t, height)
        return (width - t, 0, t, height)

    def render_ball(self, ball: BallSnapshot, screen: pygame.Surface) -> None:
        """Render ball as a white circle with a halo."""
        cx, cy = int(ball.x * self._sx), int(ball.y * self._sy)
        glow = int(self.GLOW_RADIUS * self._sx)

        halo = pygame.Surface((glow * 2, glow * 2), pygame.SRCALPHA)
        for i in range(4, 0, -1):
            pygame.draw.circle(halo, (*self.PLAYER_COLOR, 12 * (5 - i)), (glow, glow), glow * i // 4)
        screen.blit(halo, (cx - glow, cy - glow))

        pygame.draw.circle(screen, self.BALL_COLOR, (cx, cy), max(1, int(ball.radius * self._sx)))

    def render_paddle(
        self,
        paddle: PaddleSnapshot,
        is_player: bool,
        screen: pygame.Surface,
    ) -> None:
        """Render paddle as a tinted rectangle with a bright outline."""
        color = self.PLAYER_COLOR if is_player else self.CPU_COLOR
        rect = pygame.Rect(
            int(paddle.x * self._sx),
            int(paddle.y * self._sy),
            max(1, int(paddle.width * self._sx)),
            max(1, int(paddle.height * self._sy)),
        )

        body = pygame.Surface(rect.size, pygame.SRCALPHA)
        body.fill(self.PADDLE_FILL)
        body.fill((*color, 46), special_flags=pygame.BLEND_RGBA_ADD)
        screen.blit(body, rect.topleft)
        pygame.draw.rect(screen, color, rect.inflate(3, 3), 2)

    def render_hud(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render both scores near the top of the field."""
        self._ensure_font()
        width = screen.get_width()
        for value, color, x in (
            (frame.score.player, self.PLAYER_COLOR, width * 0.25),
            (frame.score.cpu, self.CPU_COLOR, width * 0.75),
        ):
            text = self._font.render(str(value), True, color)
            screen.blit(text, text.get_rect(center=(int(x), 40)))

    def render_overlay(self, frame: SimulationSnapshot, screen: pygame.Surface) -> None:
        """Render title and message on a translucent panel."""
        if frame.overlay is None:
            return
        self._ensure_font()
        title, message = frame.overlay
        width, height = screen.get_size()

        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((2, 6, 18, 170))
        screen.blit(panel, (0, 0))

        title_text = self._font.render(title, True, self.HUD_COLOR)
        message_text = self._small_font.render(message, True, self.HUD_COLOR)
        hint_text = self._small_font.render("Press Space to play", True, self.PLAYER_COLOR)
        screen.blit(title_text, title_text.get_rect(center=(width // 2, height // 2 - 40)))
        screen.blit(message_text, message_text.get_rect(center=(width // 2, height // 2 + 10)))
        screen.blit(hint_text, hint_text.get_rect(center=(width // 2, height // 2 + 50)))
