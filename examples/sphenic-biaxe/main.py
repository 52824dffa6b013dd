"""Sphenic Biaxe — two-disk twisty puzzle.

Exercises biaxe: session frame loop, command queue, drag controller and
draw lists.

Controls:
  Left click   Turn hovered disk counterclockwise (sector mode: bring sector in)
  Right click  Turn hovered disk clockwise (sector mode: send intersection out)
  Wheel        Turn hovered disk
  Drag         Turn a disk freely; snaps on release
  Q / W        Twist disk A counterclockwise / clockwise
  O / P        Twist disk B counterclockwise / clockwise
  S            Scramble
  R            Reset
  + / -        Grow / shrink disk A
  ] / [        Grow / shrink disk B
  M            Toggle sector click mode
  L            Toggle labels
  D            Toggle dark mode
  Esc          Quit
"""
from __future__ import annotations

import dataclasses
import sys

import pygame

from biaxe import (
    InputBatch,
    Preferences,
    PuzzleSession,
    ResetPuzzle,
    ScramblePuzzle,
    TwistKey,
    build_frame,
)
from biaxe.config import MAX_SIZE, MIN_SIZE
from biaxe.types import Grip

from ui.constants import (
    BG_DARK,
    BG_LIGHT,
    DRAG_THRESHOLD,
    FPS,
    RESIZE_STEP,
    SCREEN_H,
    SCREEN_W,
)
from ui.renderer import Viewport, draw_puzzle
from ui.status import draw_status_bar, draw_win_banner

TWIST_KEYS = {
    pygame.K_q: TwistKey.A_CCW,
    pygame.K_w: TwistKey.A_CW,
    pygame.K_o: TwistKey.B_CCW,
    pygame.K_p: TwistKey.B_CW,
}


class GameState:
    """Holds the puzzle session and per-frame pointer bookkeeping."""

    def __init__(self) -> None:
        self.session = PuzzleSession(prefs=Preferences())
        self.view = Viewport.fit(self.session.config.size)
        self.dark_mode = True

        # Pointer
        self.press_pos: tuple[int, int] | None = None
        self.press_button = 0
        self.dragging = False

        # Input gathered since the last frame
        self.primary_click = False
        self.secondary_click = False
        self.drag_released = False
        self.release_pos: tuple[int, int] | None = None
        self.notches: list[int] = []
        self.keys: list[TwistKey] = []

    def resize(self, grip: Grip, delta: int) -> None:
        config = self.session.config
        if grip is Grip.A:
            a = min(max(config.a + delta, MIN_SIZE), MAX_SIZE)
            new = dataclasses.replace(config, a=a)
        else:
            b = min(max(config.b + delta, MIN_SIZE), MAX_SIZE)
            new = dataclasses.replace(config, b=b)
        self.session.reconfigure(new)
        self.view = Viewport.fit(new.size)

    def press(self, pos: tuple[int, int], button: int) -> None:
        self.press_pos = pos
        self.press_button = button
        self.dragging = False

    def motion(self, pos: tuple[int, int]) -> None:
        if self.press_pos is None or self.press_button != 1 or self.dragging:
            return
        dx = pos[0] - self.press_pos[0]
        dy = pos[1] - self.press_pos[1]
        if dx * dx + dy * dy > DRAG_THRESHOLD * DRAG_THRESHOLD:
            self.dragging = True

    def release(self, pos: tuple[int, int], button: int) -> None:
        if self.press_pos is None or button != self.press_button:
            return
        if self.dragging:
            self.drag_released = True
            self.release_pos = self.press_pos
        elif button == 1:
            self.primary_click = True
        elif button == 3:
            self.secondary_click = True
        self.press_pos = None
        self.dragging = False

    def collect(self, mouse_pos: tuple[int, int]) -> InputBatch:
        """Package input since the last frame and clear it."""
        origin = self.press_pos if self.dragging else self.release_pos
        batch = InputBatch(
            cursor=self.view.to_puzzle(mouse_pos),
            primary_click=self.primary_click,
            secondary_click=self.secondary_click,
            scroll_notches=tuple(self.notches),
            keys=tuple(self.keys),
            drag_start=self.view.to_puzzle(origin) if origin is not None else None,
            drag_released=self.drag_released,
        )
        self.primary_click = False
        self.secondary_click = False
        self.drag_released = False
        self.release_pos = None
        self.notches.clear()
        self.keys.clear()
        return batch


def main() -> None:
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Sphenic Biaxe — biaxe demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    label_font = pygame.font.SysFont("sans", 18, bold=True)
    big_font = pygame.font.SysFont("sans", 28, bold=True)

    state = GameState()
    session = state.session
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key in TWIST_KEYS:
                    state.keys.append(TWIST_KEYS[event.key])

                elif event.key == pygame.K_s:
                    session.queue.enqueue(ScramblePuzzle())

                elif event.key == pygame.K_r:
                    session.queue.enqueue(ResetPuzzle())

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.resize(Grip.A, RESIZE_STEP)

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.resize(Grip.A, -RESIZE_STEP)

                elif event.key == pygame.K_RIGHTBRACKET:
                    state.resize(Grip.B, RESIZE_STEP)

                elif event.key == pygame.K_LEFTBRACKET:
                    state.resize(Grip.B, -RESIZE_STEP)

                elif event.key == pygame.K_m:
                    session.prefs.sector_click_mode = not session.prefs.sector_click_mode

                elif event.key == pygame.K_l:
                    session.prefs.show_labels = not session.prefs.show_labels

                elif event.key == pygame.K_d:
                    state.dark_mode = not state.dark_mode

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                state.press(event.pos, event.button)

            elif event.type == pygame.MOUSEMOTION:
                state.motion(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button in (1, 3):
                state.release(event.pos, event.button)

            elif event.type == pygame.MOUSEWHEEL:
                state.notches.append(event.y)

        # --- Step ---
        mouse_pos = pygame.mouse.get_pos()
        session.step(dt, state.collect(mouse_pos))

        # --- Render ---
        screen.fill(BG_DARK if state.dark_mode else BG_LIGHT)

        frame = build_frame(session, state.view.to_puzzle(mouse_pos), state.dark_mode)
        draw_puzzle(screen, frame, state.view, label_font, state.dark_mode)
        draw_status_bar(screen, font, session.config, frame, session.prefs.sector_click_mode)
        if session.has_won():
            draw_win_banner(screen, big_font)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
