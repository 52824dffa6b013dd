"""Draw lists for renderers.

:func:`build_frame` flattens a session into plain polygons in puzzle
coordinates, in painter's order.  A frontend scales them to the screen and
fills them; nothing here depends on a graphics library.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from biaxe import vec
from biaxe.session import PuzzleSession
from biaxe.types import Color, Grip, Vec2


@dataclass(frozen=True, slots=True)
class Polygon:
    points: tuple[Vec2, ...]
    color: Color
    outlined: bool = False
    label: str | None = None
    label_pos: Vec2 | None = None


@dataclass(frozen=True, slots=True)
class GripView:
    grip: Grip
    center: Vec2
    radius: float
    angle: float
    hovered: bool


@dataclass(frozen=True, slots=True)
class PuzzleFrame:
    size: Vec2
    grips: tuple[GripView, ...]
    polygons: tuple[Polygon, ...]
    needs_repaint: bool
    solved: bool
    scrambled: bool


def _moving_grip(session: PuzzleSession) -> Grip | None:
    if session.drag is not None:
        return session.drag.grip
    current = session.animation.current
    return current.grip if current is not None else None


def _transform(points: list[Vec2], center: Vec2, angle: float) -> tuple[Vec2, ...]:
    return tuple(vec.rotate_about(p, center, angle) for p in points)


def build_frame(
    session: PuzzleSession,
    cursor: Vec2 | None = None,
    dark_mode: bool = True,
) -> PuzzleFrame:
    """Describe everything to draw for *session* this frame."""
    config = session.config
    state = session.visual_state()
    hovered = config.hovered_grip(cursor)

    # The moving grip goes last so its shared cell is drawn on top.
    moving = _moving_grip(session)
    top = moving if moving is not None else Grip.A
    order = (top.other(), top)

    sphene = config.sphene_points()
    sphene_mid = vec.centroid(sphene)
    polygons: list[Polygon] = []

    for grip in order:
        n = config.n(grip)
        center = config.center(grip)
        angle = session.grip_angle(grip)
        step = math.tau / n
        stationary = config.axis_stationary(grip)
        sector = config.sector_points(grip)
        rot = state.rot(grip)

        for i in range(n):
            j = i if stationary else (rot + i) % n
            color = config.sector_color(config.color_index_in_grip(grip, j), dark_mode)
            wedge_angle = i * step + (0.0 if stationary else angle)
            polygons.append(Polygon(_transform(sector, center, wedge_angle), color))

        pieces = state.pieces(grip)
        for i in range(n):
            if i == 0 and grip is not top:
                continue
            piece = pieces[i]
            cell_angle = i * step + angle
            label = config.sticker_name(piece) if session.prefs.show_labels else None
            polygons.append(
                Polygon(
                    _transform(sphene, center, cell_angle),
                    config.sticker_color(piece, dark_mode),
                    outlined=True,
                    label=label,
                    label_pos=vec.rotate_about(sphene_mid, center, cell_angle),
                )
            )

    grips = tuple(
        GripView(
            grip=grip,
            center=config.center(grip),
            radius=config.radius(grip),
            angle=session.grip_angle(grip),
            hovered=grip is hovered,
        )
        for grip in Grip
    )
    return PuzzleFrame(
        size=config.size,
        grips=grips,
        polygons=tuple(polygons),
        needs_repaint=session.animation.is_animating or session.drag is not None,
        solved=session.is_solved(),
        scrambled=session.was_scrambled(),
    )
