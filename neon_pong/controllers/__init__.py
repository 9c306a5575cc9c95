"""Paddle controllers for the human player and the CPU."""

from .player import PlayerController
from .opponent import OpponentController, tracking_strength

__all__ = ['PlayerController', 'OpponentController', 'tracking_strength']
