"""Easing functions for twist interpolation."""
from __future__ import annotations

import math


def lerp(a: float, b: float, t: float) -> float:
    """Unclamped linear interpolation."""
    return a * (1.0 - t) + b * t


def ease_in_out_cosine(t: float) -> float:
    """Half a cosine wave: zero slope at both ends."""
    return (1.0 - math.cos(t * math.pi)) / 2.0


def animate_twist_angle(initial: float, final: float, t: float) -> float:
    """Interpolate a grip angle from *initial* to *final* along a smooth curve."""
    return lerp(initial, final, ease_in_out_cosine(t))
