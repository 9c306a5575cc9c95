"""Math helpers shared by physics and controllers.

All functions are pure; randomness comes from the caller's generator.
"""
import random
from typing import Tuple

Rect = Tuple[float, float, float, float]  # (x, y, width, height)


def clamp(value: float, lo: float, hi: float) -> float:
    """Constrain value to [lo, hi]."""
    return max(lo, min(hi, value))


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation from start toward end by fraction t."""
    return start + (end - start) * t


def random_range(rng: random.Random, lo: float, hi: float) -> float:
    """Sample uniformly from [lo, hi) using the given generator."""
    return rng.random() * (hi - lo) + lo


def sign(value: float) -> int:
    """Return -1, 0 or 1 matching the sign of value."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def step_toward(current: float, target: float, max_step: float) -> float:
    """Move current toward target by at most max_step without overshooting.

    Args:
        current: Starting value
        target: Value to approach
        max_step: Largest allowed change (non-negative)

    Returns:
        New value
    """
    distance = target - current
    return current + sign(distance) * min(abs(distance), max_step)


def circle_rect_intersects(cx: float, cy: float, radius: float, rect: Rect) -> bool:
    """Check overlap between a circle's bounding box and a rectangle.

    Touching edges do not count as an overlap.

    Args:
        cx: Circle center X
        cy: Circle center Y
        radius: Circle radius
        rect: Rectangle as (x, y, width, height)
    """
    x, y, w, h = rect
    return (
        cx - radius < x + w and
        cx + radius > x and
        cy - radius < y + h and
        cy + radius > y
    )
