"""Rainbow sampling for piece and sector colors.

The rainbow is the cyclical cubehelix rainbow (the one popularised by d3's
``interpolateRainbow``), so index ``0`` and index ``n`` land on the same hue.
"""
from __future__ import annotations

import math

from biaxe.types import Color

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
DARK_GRAY: Color = (96, 96, 96)

# Cubehelix -> RGB matrix coefficients.
_A = -0.14861
_B = 1.78277
_C = -0.29227
_D = -0.90649
_E = 1.97294


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


def cubehelix(hue: float, saturation: float, lightness: float) -> Color:
    """Convert a cubehelix colour (hue in degrees) to 8-bit RGB."""
    h = math.radians(hue + 120)
    amp = saturation * lightness * (1 - lightness)
    cos_h, sin_h = math.cos(h), math.sin(h)
    return (
        _channel(lightness + amp * (_A * cos_h + _B * sin_h)),
        _channel(lightness + amp * (_C * cos_h + _D * sin_h)),
        _channel(lightness + amp * (_E * cos_h)),
    )


def rainbow(t: float) -> Color:
    """Sample the cyclical rainbow at position *t* (wrapped into [0, 1])."""
    if t < 0 or t > 1:
        t -= math.floor(t)
    ts = abs(t - 0.5)
    return cubehelix(360 * t - 100, 1.5 - 1.5 * ts, 0.8 - 0.9 * ts)


def mix(color: Color, target: Color, amount: float) -> Color:
    return tuple(
        round(c * (1 - amount) + o * amount) for c, o in zip(color, target)
    )  # type: ignore[return-value]


def sample_rainbow(i: int, n: int, lightness: float) -> Color:
    """Sample a rainbow of *n* colors at index *i*.

    *lightness* ranges from 0 (black) to 1 (white); 0.5 leaves the rainbow
    color untouched.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    base = rainbow(i / n)
    if lightness > 0.5:
        return mix(base, WHITE, lightness * 2.0 - 1.0)
    return mix(base, BLACK, 1.0 - lightness * 2.0)
