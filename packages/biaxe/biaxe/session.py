"""PuzzleSession - owns one puzzle and drives it frame by frame."""
from __future__ import annotations

import logging
import random
import time
from collections.abc import Mapping
from typing import Any

from biaxe.animation import TwistAnimation, TwistAnimationState, target_angle
from biaxe.commands import (
    CommandQueue,
    Reconfigure,
    ResetPuzzle,
    ScramblePuzzle,
    TwistCommand,
)
from biaxe.config import PuzzleConfig
from biaxe.controller import DragState, InputBatch, interpret
from biaxe.prefs import Preferences
from biaxe.scramble import scramble
from biaxe.state import PuzzleState
from biaxe.types import Grip, SnapshotError

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


class PuzzleSession:
    """One puzzle: config, live state, animation queue, drag and scramble flag.

    Frontends enqueue commands on :attr:`queue` at any time and call
    :meth:`step` once per frame with the elapsed time and that frame's input.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        prefs: Preferences | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config if config is not None else PuzzleConfig()
        self.prefs = prefs if prefs is not None else Preferences()
        self._state = PuzzleState.new(self._config)
        self._animation = TwistAnimationState()
        self._drag: DragState | None = None
        self._scrambled = False

        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._rng = random.Random(seed)

        self._queue = CommandQueue()
        self._queue.handle(TwistCommand, self._on_twist)
        self._queue.handle(ResetPuzzle, self._on_reset)
        self._queue.handle(ScramblePuzzle, self._on_scramble)
        self._queue.handle(Reconfigure, self._on_reconfigure)

    @property
    def config(self) -> PuzzleConfig:
        return self._config

    @property
    def state(self) -> PuzzleState:
        return self._state

    @property
    def animation(self) -> TwistAnimationState:
        return self._animation

    @property
    def drag(self) -> DragState | None:
        return self._drag

    @property
    def queue(self) -> CommandQueue:
        return self._queue

    @property
    def seed(self) -> int:
        return self._seed

    # -- mutation ----------------------------------------------------------

    def twist(self, grip: Grip, amount: int, initial_angle: float = 0.0) -> PuzzleState:
        """Apply a twist now and queue its animation.  Returns the prior state."""
        before = self._state.copy()
        self._state.twist(grip, amount)
        final = target_angle(self._config.sector_angle(grip), amount, initial_angle)
        self._animation.push(TwistAnimation(before, grip, initial_angle, final))
        return before

    def reset(self) -> None:
        logger.debug("reset %dx%d puzzle", self._config.a, self._config.b)
        self._state = PuzzleState.new(self._config)
        self._scrambled = False
        self._discard_transients()

    def scramble(self) -> None:
        logger.debug("scramble %dx%d puzzle", self._config.a, self._config.b)
        self._state = scramble(self._config, self._rng)
        self._scrambled = True
        self._discard_transients()

    def reconfigure(self, config: PuzzleConfig) -> None:
        """Switch to *config*.  Changing a disk size starts a fresh puzzle."""
        if config == self._config:
            return
        sizes_changed = (config.a, config.b) != (self._config.a, self._config.b)
        logger.debug("reconfigure %r -> %r", self._config, config)
        self._config = config
        if sizes_changed:
            self.reset()

    def _discard_transients(self) -> None:
        self._animation.clear()
        self._drag = None

    # -- command handlers --------------------------------------------------

    def _on_twist(self, cmd: TwistCommand) -> bool:
        if cmd.amount == 0 and cmd.initial_angle == 0.0:
            return False
        self.twist(cmd.grip, cmd.amount, cmd.initial_angle)
        return True

    def _on_reset(self, cmd: ResetPuzzle) -> bool:
        self.reset()
        return True

    def _on_scramble(self, cmd: ScramblePuzzle) -> bool:
        self.scramble()
        return True

    def _on_reconfigure(self, cmd: Reconfigure) -> bool:
        self.reconfigure(cmd.config)
        return True

    # -- frame loop --------------------------------------------------------

    def step(self, dt: float, batch: InputBatch | None = None) -> bool:
        """Run one frame.  Returns True while another repaint is wanted."""
        self._queue.drain()

        if batch is not None:
            result = interpret(
                self._config, batch, self._drag, self.prefs.sector_click_mode
            )
            if result.cancel_animation:
                self._animation.clear()
            self._drag = result.drag
            for cmd in result.commands:
                self._queue.enqueue(cmd)
            self._queue.drain()

        animating = self._animation.proceed(dt, self.prefs)
        return animating or self._drag is not None

    # -- queries -----------------------------------------------------------

    def grip_angle(self, grip: Grip) -> float:
        if self._drag is not None and self._drag.grip is grip:
            return self._drag.offset
        return self._animation.grip_angle(grip)

    def visual_state(self) -> PuzzleState:
        return self._animation.visual_state(self._state)

    def is_solved(self) -> bool:
        return self._state.is_solved(self._config)

    def was_scrambled(self) -> bool:
        return self._scrambled

    def has_won(self) -> bool:
        return self._scrambled and self.is_solved()

    # -- persistence -------------------------------------------------------

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "config": self._config.to_dict(),
            "state": self._state.to_dict(),
        }

    def restore(self, data: Mapping[str, Any]) -> None:
        if not isinstance(data, Mapping):
            raise SnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        if not isinstance(data.get("config"), Mapping):
            raise SnapshotError("Snapshot has no puzzle config mapping")
        try:
            config = PuzzleConfig.from_dict(data["config"])
        except (TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed puzzle config: {exc}") from exc
        if not isinstance(data.get("state"), Mapping):
            raise SnapshotError("Snapshot has no puzzle state mapping")
        state = PuzzleState.from_dict(data["state"], config)

        logger.debug("restore %dx%d puzzle", config.a, config.b)
        self._config = config
        self._state = state
        self._scrambled = False
        self._discard_transients()
