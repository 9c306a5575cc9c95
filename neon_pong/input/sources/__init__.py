"""
Input source implementations.

The pygame source is imported on demand so the core stays usable without
a display.
"""

from neon_pong.input.sources.base import InputSource

__all__ = ['InputSource']
