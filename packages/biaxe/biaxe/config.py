"""PuzzleConfig - disk sizes and everything derived from them.

All geometry is expressed in puzzle coordinates: the unit is one polygon
edge, the origin is the top-left corner of the bounding box and y grows
downward.  Both disks sit on the horizontal line ``y = height / 2`` and
share the vertical midline ``x = midpoint_x``.
"""
from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from biaxe import vec
from biaxe.colors import DARK_GRAY, sample_rainbow
from biaxe.types import Color, Grip, Vec2

MIN_SIZE = 2
MAX_SIZE = 16

# Extra sides used when sizing a disk, so neighbouring sectors never overlap.
CONSERVATIVENESS = 1
POLYGON_RESOLUTION = 200

DOT_NAME = "•"


def polygon_circumradius(n: int) -> float:
    """Circumradius of a unit-edge regular polygon with *n* sides."""
    return 0.5 / math.sin(math.pi / n)


def polygon_apothem(n: int) -> float:
    """Apothem (inradius) of a unit-edge regular polygon with *n* sides."""
    return 0.5 / math.tan(math.pi / n)


def _unit_sector(angle: float) -> list[Vec2]:
    """Wedge of width *angle* centred on +x, on the unit circle, apex last."""
    frac = int(math.tau / angle) + 1
    n = max(POLYGON_RESOLUTION // frac, 1)
    points = [
        (math.cos((i / n - 0.5) * angle), math.sin((i / n - 0.5) * angle))
        for i in range(n + 1)
    ]
    points.append((0.0, 0.0))
    return points


@dataclass(frozen=True, slots=True)
class PuzzleConfig:
    a: int = 5
    b: int = 2
    a_axis_stationary: bool = False
    b_axis_stationary: bool = True

    def __post_init__(self) -> None:
        for name in ("a", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ValueError(
                    f"{name} must be in [{MIN_SIZE}, {MAX_SIZE}], got {value}"
                )

    # -- sizes -------------------------------------------------------------

    def n(self, grip: Grip) -> int:
        return self.a if grip is Grip.A else self.b

    def sector_angle(self, grip: Grip) -> float:
        return math.tau / self.n(grip)

    def radius(self, grip: Grip) -> float:
        return polygon_circumradius(self.n(grip) + CONSERVATIVENESS)

    def radius_sq(self, grip: Grip) -> float:
        r = self.radius(grip)
        return r * r

    def apothem(self, grip: Grip) -> float:
        return polygon_apothem(self.n(grip) + CONSERVATIVENESS)

    def axis_stationary(self, grip: Grip) -> bool:
        return self.a_axis_stationary if grip is Grip.A else self.b_axis_stationary

    # -- layout ------------------------------------------------------------

    @property
    def height(self) -> float:
        return max(self.radius(Grip.A), self.radius(Grip.B)) * 2.0

    @property
    def width(self) -> float:
        return (
            self.radius(Grip.A)
            + self.radius(Grip.B)
            + self.apothem(Grip.A)
            + self.apothem(Grip.B)
        )

    @property
    def midpoint_x(self) -> float:
        return self.radius(Grip.A) + self.apothem(Grip.A)

    @property
    def midpoint(self) -> Vec2:
        return (self.midpoint_x, self.height * 0.5)

    @property
    def size(self) -> Vec2:
        return (self.width, self.height)

    def center(self, grip: Grip) -> Vec2:
        if grip is Grip.A:
            return (self.radius(Grip.A), self.height * 0.5)
        return (self.width - self.radius(Grip.B), self.height * 0.5)

    # -- hit testing -------------------------------------------------------

    def is_hovered(self, grip: Grip, cursor: Vec2) -> bool:
        inside = vec.length_sq(vec.sub(cursor, self.center(grip))) < self.radius_sq(grip)
        if grip is Grip.A:
            return inside and cursor[0] < self.midpoint_x
        return inside and cursor[0] >= self.midpoint_x

    def hovered_grip(self, cursor: Vec2 | None) -> Grip | None:
        if cursor is None:
            return None
        for grip in Grip:
            if self.is_hovered(grip, cursor):
                return grip
        return None

    # -- outlines ----------------------------------------------------------

    def sphene_points(self) -> list[Vec2]:
        """Outline of the shared cell, unrotated, in puzzle coordinates.

        The lens is bounded on the right by grip A's circle and on the left
        by grip B's circle.  Rotate it about a grip center by ``i * 2pi/n``
        to get that grip's cell ``i``.
        """
        points: list[Vec2] = []
        mid_y = self.height * 0.5

        resolution = POLYGON_RESOLUTION // self.a
        cx = self.center(Grip.A)[0]
        for i in range(resolution):
            y = i / resolution - 0.5
            points.append((cx + math.sqrt(self.radius_sq(Grip.A) - y * y), y + mid_y))

        resolution = POLYGON_RESOLUTION // self.b
        cx = self.center(Grip.B)[0]
        for i in range(resolution):
            y = -(i / resolution - 0.5)
            points.append((cx - math.sqrt(self.radius_sq(Grip.B) - y * y), y + mid_y))

        return points

    def sector_radius(self, grip: Grip) -> float:
        inner = self.apothem(Grip.A) + self.apothem(Grip.B) - self.radius(grip.other())
        t = 0.5 if self.axis_stationary(grip) else 0.0
        return self.radius(grip) * (1.0 - t) + inner * t

    def sector_points(self, grip: Grip) -> list[Vec2]:
        """Outline of sector 0 of *grip*, unrotated, in puzzle coordinates.

        Grip A's sector 0 faces +x and grip B's faces -x, i.e. both face the
        shared cell.
        """
        sign = 1.0 if grip is Grip.A else -1.0
        radius = self.sector_radius(grip) * sign
        center = self.center(grip)
        return [vec.add(center, vec.scale(p, radius)) for p in _unit_sector(self.sector_angle(grip))]

    # -- colors ------------------------------------------------------------

    def _shared_color(self, brightness: float, dark_mode: bool) -> Color:
        if self.b == 2:
            return sample_rainbow(0, 1, brightness * 0.5)
        return sample_rainbow(0, 1, brightness * (0.45 if dark_mode else 0.65))

    def _a_color(self, i: int, brightness: float, dark_mode: bool) -> Color:
        if i == 0:
            return self._shared_color(brightness, dark_mode)
        return sample_rainbow(self.a - i, self.a, brightness * 0.5)

    def _b_color(self, i: int, brightness: float, dark_mode: bool) -> Color:
        if i == 0:
            return self._shared_color(brightness, dark_mode)
        if self.b == 2:
            return DARK_GRAY
        return sample_rainbow(i, self.b, brightness * (0.25 if dark_mode else 0.75))

    def color(self, i: int, brightness: float, dark_mode: bool) -> Color:
        """Color of piece identifier *i*."""
        if i < self.a:
            return self._a_color(i, brightness, dark_mode)
        return self._b_color(i - self.a + 1, brightness, dark_mode)

    def sticker_color(self, i: int, dark_mode: bool) -> Color:
        return self.color(i, 1.0 if dark_mode else 0.85, dark_mode)

    def sector_color(self, i: int, dark_mode: bool) -> Color:
        return self.color(i, 0.9, dark_mode)

    def color_index_in_grip(self, grip: Grip, i: int) -> int:
        """Map grip-local sector index *i* to a global piece identifier."""
        if grip is Grip.B and i > 0:
            return i + self.a - 1
        return i

    # -- names -------------------------------------------------------------

    def sector_name(self, grip: Grip, i: int) -> str:
        if i == 0:
            return DOT_NAME
        if grip is Grip.A:
            return chr(ord("A") + i - 1)
        return str(self.b - i)

    def sticker_name(self, i: int) -> str:
        if i == 0:
            return DOT_NAME
        if i < self.a:
            return chr(ord("A") + i - 1)
        return str(self.a + self.b - 1 - i)

    # -- persistence -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PuzzleConfig:
        defaults = cls()
        return cls(
            a=data.get("a", defaults.a),
            b=data.get("b", defaults.b),
            a_axis_stationary=bool(data.get("a_axis_stationary", defaults.a_axis_stationary)),
            b_axis_stationary=bool(data.get("b_axis_stationary", defaults.b_axis_stationary)),
        )
