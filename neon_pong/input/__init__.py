"""
Input abstraction for Neon Pong.

Player inputs are plain values; sources (pygame, tests, other frontends)
produce them and the simulation consumes them.
"""

from neon_pong.input.input_event import (
    Command,
    DirectionalInput,
    PlayerInput,
    PointerInput,
)

__all__ = ['Command', 'DirectionalInput', 'PlayerInput', 'PointerInput']
