"""Tests for scrambling."""
from __future__ import annotations

import random

import pytest

from biaxe.config import PuzzleConfig
from biaxe.scramble import SCRAMBLE_TWISTS, scramble
from biaxe.state import PuzzleState


class TestScramble:
    def test_enough_twists(self) -> None:
        assert SCRAMBLE_TWISTS >= 300

    @pytest.mark.parametrize("a,b", [(5, 3), (7, 4), (9, 9), (16, 16)])
    def test_not_solved(self, a: int, b: int) -> None:
        config = PuzzleConfig(a=a, b=b)
        state = scramble(config, random.Random(1234))
        assert not state.is_solved(config)

    def test_reachable_state_is_valid(self) -> None:
        config = PuzzleConfig(a=7, b=4)
        state = scramble(config, random.Random(99))
        state.check_invariants()
        assert state.a == 7
        assert state.b == 4

    def test_same_seed_same_state(self) -> None:
        config = PuzzleConfig(a=6, b=5)
        assert scramble(config, random.Random(5)) == scramble(config, random.Random(5))

    def test_zero_twists_is_fresh(self) -> None:
        config = PuzzleConfig(a=4, b=3)
        assert scramble(config, random.Random(0), twists=0) == PuzzleState.new(config)
