"""Puzzle renderer: scales a PuzzleFrame onto the window."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from biaxe import PuzzleFrame
from biaxe.types import Vec2

from ui.constants import (
    HOVER_RING,
    LABEL_DARK,
    OUTLINE_DARK,
    OUTLINE_LIGHT,
    OUTLINE_W,
    PAD,
    SCREEN_H,
    SCREEN_W,
    STATUS_H,
)


@dataclass(frozen=True)
class Viewport:
    """Uniform scale plus offset between puzzle units and pixels."""

    scale: float
    origin: Vec2

    @classmethod
    def fit(cls, size: Vec2) -> Viewport:
        avail_w = SCREEN_W - 2 * PAD
        avail_h = SCREEN_H - STATUS_H - 2 * PAD
        scale = min(avail_w / size[0], avail_h / size[1])
        ox = (SCREEN_W - size[0] * scale) / 2
        oy = (SCREEN_H - STATUS_H - size[1] * scale) / 2
        return cls(scale, (ox, oy))

    def to_screen(self, p: Vec2) -> tuple[int, int]:
        return (
            round(self.origin[0] + p[0] * self.scale),
            round(self.origin[1] + p[1] * self.scale),
        )

    def to_puzzle(self, pos: tuple[int, int]) -> Vec2:
        return (
            (pos[0] - self.origin[0]) / self.scale,
            (pos[1] - self.origin[1]) / self.scale,
        )


def draw_puzzle(
    surface: pygame.Surface,
    frame: PuzzleFrame,
    view: Viewport,
    font: pygame.font.Font,
    dark_mode: bool,
) -> None:
    """Fill every polygon in painter's order, then labels and hover rings."""
    outline = OUTLINE_DARK if dark_mode else OUTLINE_LIGHT

    for poly in frame.polygons:
        points = [view.to_screen(p) for p in poly.points]
        pygame.draw.polygon(surface, poly.color, points)
        if poly.outlined:
            pygame.draw.polygon(surface, outline, points, OUTLINE_W)

    for poly in frame.polygons:
        if poly.label is None or poly.label_pos is None:
            continue
        text = font.render(poly.label, True, LABEL_DARK)
        rect = text.get_rect(center=view.to_screen(poly.label_pos))
        surface.blit(text, rect)

    for grip in frame.grips:
        if grip.hovered:
            radius = round(grip.radius * view.scale)
            pygame.draw.circle(surface, HOVER_RING, view.to_screen(grip.center), radius, 1)
