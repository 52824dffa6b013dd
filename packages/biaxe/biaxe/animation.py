"""Twist animation queue.

Each twist mutates the live :class:`PuzzleState` immediately and pushes a
:class:`TwistAnimation` holding the state as it was before the twist.  The
renderer draws that snapshot with the twisted grip rotated by
:meth:`TwistAnimationState.angle` until the animation completes, at which
point the snapshot rotated by ``final_angle`` looks exactly like the next
state in the queue (or the live state).
"""
from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from biaxe.easing import animate_twist_angle
from biaxe.state import PuzzleState
from biaxe.types import Grip

if TYPE_CHECKING:
    from biaxe.prefs import Preferences


def target_angle(sector_angle: float, amount: int, initial_angle: float) -> float:
    """Final angle for a twist of *amount* sectors, taking the short way around.

    Whole turns are added or removed until the target is within half a turn
    of *initial_angle*.
    """
    final = amount * sector_angle
    while final - initial_angle > math.pi:
        final -= math.tau
    while final - initial_angle < -math.pi:
        final += math.tau
    return final


@dataclass(frozen=True, slots=True)
class TwistAnimation:
    state: PuzzleState
    grip: Grip
    initial_angle: float
    final_angle: float

    def angle(self, t: float) -> float:
        return animate_twist_angle(self.initial_angle, self.final_angle, t)


class TwistAnimationState:
    """FIFO of pending twist animations plus the progress of the head one."""

    def __init__(self) -> None:
        self._queue: deque[TwistAnimation] = deque()
        self._t = 0.0

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[TwistAnimation]:
        return iter(self._queue)

    @property
    def current(self) -> TwistAnimation | None:
        return self._queue[0] if self._queue else None

    @property
    def progress(self) -> float:
        return self._t

    @property
    def is_animating(self) -> bool:
        return bool(self._queue)

    def push(self, animation: TwistAnimation) -> None:
        self._queue.append(animation)

    def clear(self) -> None:
        self._queue.clear()
        self._t = 0.0

    def proceed(self, dt: float, prefs: Preferences) -> bool:
        """Advance the head animation by *dt* seconds.

        At most one animation completes per call.  Returns True while there
        is still something to animate, i.e. another tick is wanted.
        """
        if not self._queue:
            return False

        duration = prefs.twist_duration
        if duration <= 0:
            self._t = 1.0
        else:
            self._t = min(self._t + dt / duration, 1.0)

        if self._t >= 1.0:
            self._queue.popleft()
            self._t = 0.0

        return bool(self._queue)

    def angle(self) -> float:
        current = self.current
        if current is None:
            return 0.0
        return current.angle(self._t)

    def grip_angle(self, grip: Grip) -> float:
        """Visual rotation of *grip*; 0 unless it is the grip being animated."""
        current = self.current
        if current is None or current.grip is not grip:
            return 0.0
        return current.angle(self._t)

    def visual_state(self, live: PuzzleState) -> PuzzleState:
        """Piece arrangement to draw: the pre-twist snapshot while animating."""
        current = self.current
        if current is None:
            return live
        return current.state
