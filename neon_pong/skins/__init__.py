"""Neon Pong skins (pygame renderers)."""

from .base import PongSkin
from .neon import NeonSkin

SKINS = {
    NeonSkin.NAME: NeonSkin,
}

__all__ = ['PongSkin', 'NeonSkin', 'SKINS']
