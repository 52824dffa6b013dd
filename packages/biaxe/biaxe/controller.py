"""Interaction controller - raw input to twist commands.

:func:`interpret` is a pure function of the puzzle geometry, one frame of
input and the drag carried over from the previous frame.  It never touches
the puzzle state; the session applies the commands it returns.

Sign convention: positive angles and amounts are clockwise on screen (y
grows downward), matching :meth:`PuzzleState.twist_cw`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, replace

from biaxe import vec
from biaxe.commands import TwistCommand
from biaxe.config import PuzzleConfig
from biaxe.types import Grip, TwistKey, Vec2

KEY_TWISTS: dict[TwistKey, TwistCommand] = {
    TwistKey.A_CCW: TwistCommand(Grip.A, -1),
    TwistKey.A_CW: TwistCommand(Grip.A, 1),
    TwistKey.B_CCW: TwistCommand(Grip.B, -1),
    TwistKey.B_CW: TwistCommand(Grip.B, 1),
}


@dataclass(frozen=True, slots=True)
class InputBatch:
    """One frame of input, in puzzle coordinates.

    ``drag_start`` is the point where the pointer went down, set on every
    frame while a drag is in progress.  ``scroll_notches`` holds one entry
    per wheel event; positive is scrolling up.
    """

    cursor: Vec2 | None = None
    primary_click: bool = False
    secondary_click: bool = False
    scroll_notches: tuple[int, ...] = ()
    keys: tuple[TwistKey, ...] = ()
    drag_start: Vec2 | None = None
    drag_released: bool = False


@dataclass(frozen=True, slots=True)
class DragState:
    grip: Grip
    origin: Vec2
    offset: float = 0.0


@dataclass(frozen=True, slots=True)
class ControlResult:
    drag: DragState | None = None
    commands: tuple[TwistCommand, ...] = ()
    cancel_animation: bool = False

    @property
    def drag_offset(self) -> float:
        return self.drag.offset if self.drag is not None else 0.0


def nearest_sector(sectors: float) -> int:
    """Round a fractional sector count to the nearest whole one, ties away from zero."""
    return int(math.copysign(math.floor(abs(sectors) + 0.5), sectors))


def drag_offset(config: PuzzleConfig, drag: DragState, cursor: Vec2) -> float:
    """Angle swept from the drag origin to *cursor*, unwrapped against the last offset."""
    center = config.center(drag.grip)
    start = vec.sub(drag.origin, center)
    current = vec.sub(cursor, center)
    if vec.length_sq(start) == 0.0 or vec.length_sq(current) == 0.0:
        return drag.offset
    raw = vec.signed_angle(start, current)
    return drag.offset + vec.wrap_angle(raw - drag.offset)


def sector_offset(config: PuzzleConfig, grip: Grip, point: Vec2) -> int:
    """Signed index of the sector under *point*, relative to the shared cell.

    Grip B's cell 0 faces -x, so its angle is measured from the mirrored axis.
    """
    dx, dy = vec.sub(point, config.center(grip))
    angle = math.atan2(dy, dx)
    if grip is Grip.B:
        angle += math.pi
    return nearest_sector(vec.wrap_angle(angle) / config.sector_angle(grip))


def _click_command(
    config: PuzzleConfig,
    grip: Grip,
    cursor: Vec2,
    secondary: bool,
    sector_click_mode: bool,
) -> TwistCommand | None:
    if not sector_click_mode:
        return TwistCommand(grip, 1 if secondary else -1)
    offset = sector_offset(config, grip, cursor)
    if offset == 0:
        return None
    # Primary brings the clicked sector to the intersection.
    return TwistCommand(grip, offset if secondary else -offset)


def interpret(
    config: PuzzleConfig,
    batch: InputBatch,
    drag: DragState | None = None,
    sector_click_mode: bool = False,
) -> ControlResult:
    """Turn one frame of input into a new drag state and twist commands."""
    cancel = False
    if drag is None and batch.drag_start is not None:
        grip = config.hovered_grip(batch.drag_start)
        if grip is not None:
            drag = DragState(grip=grip, origin=batch.drag_start)
            cancel = True

    if drag is not None:
        if batch.cursor is not None:
            drag = replace(drag, offset=drag_offset(config, drag, batch.cursor))
        if not batch.drag_released:
            return ControlResult(drag=drag, cancel_animation=cancel)
        amount = nearest_sector(drag.offset / config.sector_angle(drag.grip))
        release = TwistCommand(drag.grip, amount, initial_angle=drag.offset)
        return ControlResult(commands=(release,), cancel_animation=cancel)

    commands: list[TwistCommand] = []
    grip = config.hovered_grip(batch.cursor)
    if grip is not None and batch.cursor is not None:
        for clicked, secondary in ((batch.primary_click, False), (batch.secondary_click, True)):
            if not clicked:
                continue
            cmd = _click_command(config, grip, batch.cursor, secondary, sector_click_mode)
            if cmd is not None:
                commands.append(cmd)

        notches = sum(batch.scroll_notches)
        if notches:
            commands.append(TwistCommand(grip, -notches))

    commands.extend(KEY_TWISTS[key] for key in batch.keys)
    return ControlResult(commands=tuple(commands))
