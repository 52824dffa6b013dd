"""Bottom status bar and win banner."""
from __future__ import annotations

import pygame

from biaxe import PuzzleConfig, PuzzleFrame

from ui.constants import (
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
    WIN_COLOR,
)


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    config: PuzzleConfig,
    frame: PuzzleFrame,
    sector_click_mode: bool,
) -> None:
    """Draw the bottom bar: puzzle size, click mode and key hints."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    mode = "sector" if sector_click_mode else "turn"
    if frame.solved:
        progress = "solved"
    elif frame.scrambled:
        progress = "scrambled"
    else:
        progress = "twisted"
    info = f"{config.a}x{config.b}  |  {progress}  |  click: {mode}"
    surface.blit(font.render(info, True, TEXT_COLOR), (10, y + 10))

    hints = "Q/W O/P twist  S scramble  R reset  +/- size  M mode  L labels  D theme"
    text = font.render(hints, True, TEXT_DIM)
    surface.blit(text, (SCREEN_W - text.get_width() - 10, y + 10))


def draw_win_banner(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Overlay shown once a scrambled puzzle is solved."""
    text = font.render("Solved!", True, WIN_COLOR)
    rect = text.get_rect(center=(SCREEN_W // 2, 24))
    surface.blit(text, rect)
