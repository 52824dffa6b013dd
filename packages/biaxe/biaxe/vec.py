"""2D vector helpers operating on tuple[float, float]."""
from __future__ import annotations

import math

from biaxe.types import Vec2


def add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec2, s: float) -> Vec2:
    return (v[0] * s, v[1] * s)


def dot(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vec2, b: Vec2) -> float:
    return a[0] * b[1] - a[1] * b[0]


def length_sq(v: Vec2) -> float:
    return dot(v, v)


def rotate(v: Vec2, angle: float) -> Vec2:
    sin, cos = math.sin(angle), math.cos(angle)
    return (cos * v[0] - sin * v[1], sin * v[0] + cos * v[1])


def rotate_about(p: Vec2, center: Vec2, angle: float) -> Vec2:
    return add(center, rotate(sub(p, center), angle))


def signed_angle(a: Vec2, b: Vec2) -> float:
    """Signed angle in (-pi, pi] turning *a* onto *b*.

    Positive angles follow the rotation direction of :func:`rotate`.
    """
    return math.atan2(cross(a, b), dot(a, b))


def wrap_angle(angle: float) -> float:
    """Reduce *angle* to (-pi, pi]."""
    wrapped = math.remainder(angle, math.tau)
    if wrapped == -math.pi:
        return math.pi
    return wrapped


def centroid(points: list[Vec2]) -> Vec2:
    if not points:
        raise ValueError("centroid of an empty point list")
    n = len(points)
    return (sum(p[0] for p in points) / n, sum(p[1] for p in points) / n)
