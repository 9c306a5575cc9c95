"""Neon Pong entities."""

from .paddle import Paddle, PlayerPaddle, ComputerPaddle
from .ball import Ball, BallConfig
from .score import Score

__all__ = [
    'Paddle', 'PlayerPaddle', 'ComputerPaddle',
    'Ball', 'BallConfig',
    'Score',
]
