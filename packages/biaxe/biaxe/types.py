"""Shared type aliases, enums and errors for the biaxe puzzle core."""

from __future__ import annotations

import enum

Vec2 = tuple[float, float]
Color = tuple[int, int, int]


class Grip(enum.Enum):
    """One of the two rotatable disks."""

    A = "A"
    B = "B"

    def other(self) -> Grip:
        return Grip.B if self is Grip.A else Grip.A


class TwistKey(enum.Enum):
    """Dedicated keys that each trigger a unit twist."""

    A_CCW = "a_ccw"
    A_CW = "a_cw"
    B_CCW = "b_ccw"
    B_CW = "b_cw"


class InvariantError(AssertionError):
    """Raised when a puzzle state breaks one of its structural invariants."""


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed state)."""
