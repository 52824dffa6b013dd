"""Scrambling by random legal twists."""
from __future__ import annotations

import random

from biaxe.config import PuzzleConfig
from biaxe.state import PuzzleState
from biaxe.types import Grip

SCRAMBLE_TWISTS = 500


def scramble(
    config: PuzzleConfig,
    rng: random.Random,
    twists: int = SCRAMBLE_TWISTS,
) -> PuzzleState:
    """Return a fresh state with *twists* random twists applied.

    Grips alternate so consecutive twists never merge into one; each twist
    turns by a random nonzero amount in a random direction.
    """
    state = PuzzleState.new(config)
    grip = rng.choice((Grip.A, Grip.B))
    for _ in range(twists):
        amount = rng.randint(1, config.n(grip) - 1)
        if rng.random() < 0.5:
            state.twist_cw(grip, amount)
        else:
            state.twist_ccw(grip, amount)
        grip = grip.other()
    state.check_invariants()
    return state
