"""Tests for PuzzleSession - the frame loop tying everything together."""
from __future__ import annotations

import dataclasses
import json
import logging
import math

import pytest

from biaxe import (
    Grip,
    InputBatch,
    Preferences,
    PuzzleConfig,
    PuzzleSession,
    PuzzleState,
    Reconfigure,
    ResetPuzzle,
    ScramblePuzzle,
    SnapshotError,
    TwistCommand,
    TwistKey,
)


@pytest.fixture
def session() -> PuzzleSession:
    return PuzzleSession(PuzzleConfig(a=5, b=3), Preferences(twist_duration=0.2), seed=42)


def _polar(session: PuzzleSession, grip: Grip, degrees: float, r: float = 0.5) -> tuple[float, float]:
    cx, cy = session.config.center(grip)
    rad = math.radians(degrees)
    return (cx + r * math.cos(rad), cy + r * math.sin(rad))


class TestConstruction:
    def test_defaults(self) -> None:
        session = PuzzleSession()
        assert session.config == PuzzleConfig()
        assert session.prefs == Preferences()
        assert session.is_solved()
        assert not session.was_scrambled()
        assert isinstance(session.seed, int)

    def test_explicit_seed(self, session: PuzzleSession) -> None:
        assert session.seed == 42

    def test_idle_step(self, session: PuzzleSession) -> None:
        assert not session.step(0.016)
        assert not session.step(0.016, InputBatch())


class TestTwist:
    def test_twist_returns_prior_state(self, session: PuzzleSession) -> None:
        before = session.twist(Grip.A, 1)
        assert before == PuzzleState.new(session.config)
        assert session.state.a_pieces == [4, 0, 1, 2, 3]

    def test_queued_twists_play_in_order(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 1)
        session.twist(Grip.A, 1)

        # Logical state is fully applied before any animation runs.
        assert session.state.a_pieces == [3, 4, 0, 1, 2]
        assert not session.is_solved()
        assert len(session.animation) == 2

        first, second = list(session.animation)
        step = math.tau / 5
        assert math.isclose(first.final_angle, step)
        assert math.isclose(second.final_angle, step)
        assert first.state == PuzzleState.new(session.config)
        assert second.state.a_pieces == [4, 0, 1, 2, 3]

        assert session.step(0.2)
        assert session.animation.current is second
        assert session.visual_state() is second.state
        assert not session.step(0.2)
        assert session.visual_state() is session.state

    def test_is_solved_ignores_animation(self, session: PuzzleSession) -> None:
        session.twist(Grip.B, 1)
        session.twist(Grip.B, -1)
        assert session.is_solved()
        assert len(session.animation) == 2

    def test_grip_angle_follows_animation(self, session: PuzzleSession) -> None:
        session.twist(Grip.B, -1)
        session.step(0.1)
        assert session.grip_angle(Grip.A) == 0.0
        assert math.isclose(session.grip_angle(Grip.B), -math.tau / 6)

    def test_long_twist_takes_short_way(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 4)
        anim = session.animation.current
        assert anim is not None
        assert math.isclose(anim.final_angle, -math.tau / 5)

    def test_full_turn_holds_queue_without_moving(self, session: PuzzleSession) -> None:
        before = session.state.copy()
        session.twist(Grip.B, 3)
        assert session.state == before
        session.twist(Grip.A, 1)

        full_turn, _ = list(session.animation)
        assert full_turn.initial_angle == 0.0
        assert math.isclose(full_turn.final_angle, 0.0, abs_tol=1e-12)

        assert session.step(0.1)
        assert math.isclose(session.grip_angle(Grip.B), 0.0, abs_tol=1e-12)
        assert session.animation.current is full_turn
        session.step(0.1)
        assert session.animation.current is not full_turn


class TestInput:
    def test_click_twists(self, session: PuzzleSession) -> None:
        batch = InputBatch(cursor=session.config.center(Grip.A), primary_click=True)
        assert session.step(0.01, batch)
        assert session.state.a_pieces == [1, 2, 3, 4, 0]

    def test_key_twists(self, session: PuzzleSession) -> None:
        session.step(0.01, InputBatch(keys=(TwistKey.B_CW,)))
        assert session.state.b_pieces == [6, 0, 5]

    def test_sector_click_mode(self, session: PuzzleSession) -> None:
        session.prefs.sector_click_mode = True
        batch = InputBatch(cursor=_polar(session, Grip.A, 144), primary_click=True)
        session.step(0.01, batch)
        assert session.state.a_pieces == [2, 3, 4, 0, 1]

    def test_drag_shows_offset_without_mutation(self, session: PuzzleSession) -> None:
        start = _polar(session, Grip.A, 10)
        session.step(0.01, InputBatch(cursor=start, drag_start=start))
        assert session.step(0.01, InputBatch(cursor=_polar(session, Grip.A, 100), drag_start=start))
        assert session.is_solved()
        assert len(session.animation) == 0
        assert math.isclose(session.grip_angle(Grip.A), math.radians(90))

    def test_drag_release_continues_from_offset(self, session: PuzzleSession) -> None:
        start = _polar(session, Grip.A, 10)
        end = _polar(session, Grip.A, 100)
        session.step(0.0, InputBatch(cursor=start, drag_start=start))
        session.step(0.0, InputBatch(cursor=end, drag_start=start))
        session.step(0.0, InputBatch(cursor=end, drag_start=start, drag_released=True))

        assert session.drag is None
        assert session.state.a_pieces == [4, 0, 1, 2, 3]
        anim = session.animation.current
        assert anim is not None
        assert math.isclose(anim.initial_angle, math.radians(90))
        assert math.isclose(anim.final_angle, math.radians(72))
        assert math.isclose(session.grip_angle(Grip.A), math.radians(90))

    def test_zero_drag_settles_back(self, session: PuzzleSession) -> None:
        start = _polar(session, Grip.A, 0)
        end = _polar(session, Grip.A, 20)
        session.step(0.0, InputBatch(cursor=start, drag_start=start))
        session.step(0.0, InputBatch(cursor=end, drag_start=start, drag_released=True))
        assert session.is_solved()
        anim = session.animation.current
        assert anim is not None
        assert anim.final_angle == 0.0
        assert math.isclose(anim.initial_angle, math.radians(20))

    def test_drag_cancels_animation(self, session: PuzzleSession) -> None:
        session.twist(Grip.B, 1)
        session.twist(Grip.B, 1)
        start = _polar(session, Grip.A, 0)
        session.step(0.01, InputBatch(cursor=start, drag_start=start))
        assert len(session.animation) == 0
        assert session.drag is not None
        assert session.state.b_pieces == [5, 6, 0]


class TestCommands:
    def test_twist_command(self, session: PuzzleSession) -> None:
        session.queue.enqueue(TwistCommand(Grip.A, 2))
        assert session.queue.pending() == 1
        session.step(0.0)
        assert session.queue.pending() == 0
        assert session.state.a_pieces == [3, 4, 0, 1, 2]

    def test_zero_twist_command_rejected(self, session: PuzzleSession) -> None:
        session.queue.enqueue(TwistCommand(Grip.A, 0))
        assert session.queue.drain() == [(TwistCommand(Grip.A, 0), False)]
        assert len(session.animation) == 0

    def test_scramble_and_reset_commands(self, session: PuzzleSession) -> None:
        session.queue.enqueue(ScramblePuzzle())
        session.step(0.0)
        assert session.was_scrambled()
        session.queue.enqueue(ResetPuzzle())
        session.step(0.0)
        assert not session.was_scrambled()
        assert session.is_solved()

    def test_reconfigure_command(self, session: PuzzleSession) -> None:
        session.queue.enqueue(Reconfigure(PuzzleConfig(a=7, b=3)))
        session.step(0.0)
        assert session.config.a == 7
        assert session.state.a == 7

    def test_commands_run_before_input(self, session: PuzzleSession) -> None:
        session.queue.enqueue(Reconfigure(PuzzleConfig(a=4, b=3)))
        session.step(0.0, InputBatch(keys=(TwistKey.A_CW,)))
        assert session.state.a_pieces == [3, 0, 1, 2]


class TestLifecycle:
    def test_scramble(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 1)
        session.scramble()
        assert session.was_scrambled()
        assert not session.is_solved()
        assert len(session.animation) == 0
        session.state.check_invariants()

    def test_scramble_depends_on_seed(self) -> None:
        one = PuzzleSession(PuzzleConfig(a=8, b=6), seed=1)
        two = PuzzleSession(PuzzleConfig(a=8, b=6), seed=1)
        one.scramble()
        two.scramble()
        assert one.state == two.state

    def test_was_scrambled_survives_twists(self, session: PuzzleSession) -> None:
        session.scramble()
        session.twist(Grip.A, 1)
        assert session.was_scrambled()

    def test_win_requires_scramble(self, session: PuzzleSession) -> None:
        assert session.is_solved()
        assert not session.has_won()

    def test_win_after_undoing_scramble(self, session: PuzzleSession) -> None:
        session.scramble()
        session.state.a_pieces[:] = [0, 1, 2, 3, 4]
        session.state.b_pieces[:] = [0, 5, 6]
        assert session.has_won()

    def test_reset(self, session: PuzzleSession) -> None:
        session.scramble()
        session.twist(Grip.B, 1)
        session.reset()
        assert session.is_solved()
        assert not session.was_scrambled()
        assert len(session.animation) == 0

    def test_reconfigure_sizes_resets(self, session: PuzzleSession) -> None:
        session.scramble()
        session.twist(Grip.A, 1)
        session.reconfigure(PuzzleConfig(a=6, b=4))
        assert session.state == PuzzleState.new(PuzzleConfig(a=6, b=4))
        assert not session.was_scrambled()
        assert len(session.animation) == 0

    def test_successive_resizes_compound(self, session: PuzzleSession) -> None:
        for _ in range(2):
            session.reconfigure(dataclasses.replace(session.config, a=session.config.a + 1))
        assert session.config.a == 7
        assert session.state.a == 7

    def test_reconfigure_flags_keeps_state(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 1)
        before = session.state.copy()
        session.reconfigure(PuzzleConfig(a=5, b=3, a_axis_stationary=True))
        assert session.state == before
        assert session.config.a_axis_stationary

    @pytest.mark.parametrize(
        "discard",
        [
            lambda s: s.reset(),
            lambda s: s.scramble(),
            lambda s: s.reconfigure(PuzzleConfig(a=6, b=4)),
            lambda s: s.restore(s.snapshot()),
        ],
        ids=["reset", "scramble", "reconfigure", "restore"],
    )
    def test_lifecycle_drops_live_drag(self, session: PuzzleSession, discard) -> None:
        start = _polar(session, Grip.A, 10)
        session.step(0.0, InputBatch(cursor=start, drag_start=start))
        session.step(0.0, InputBatch(cursor=_polar(session, Grip.A, 60), drag_start=start))
        assert session.drag is not None
        assert session.grip_angle(Grip.A) != 0.0

        discard(session)
        assert session.drag is None
        assert session.grip_angle(Grip.A) == 0.0
        assert session.grip_angle(Grip.B) == 0.0
        assert len(session.animation) == 0

    def test_lifecycle_logging(self, session: PuzzleSession, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="biaxe.session"):
            session.scramble()
            session.reset()
        messages = [r.getMessage() for r in caplog.records]
        assert "scramble 5x3 puzzle" in messages
        assert "reset 5x3 puzzle" in messages


class TestSnapshot:
    def test_round_trip(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 2)
        session.twist(Grip.B, -1)
        data = json.loads(json.dumps(session.snapshot()))

        other = PuzzleSession(seed=0)
        other.restore(data)
        assert other.config == session.config
        assert other.state == session.state
        assert len(other.animation) == 0

    def test_snapshot_has_no_transients(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 1)
        assert set(session.snapshot()) == {"version", "config", "state"}

    def test_version_mismatch(self, session: PuzzleSession) -> None:
        data = session.snapshot()
        data["version"] = 99
        with pytest.raises(SnapshotError):
            session.restore(data)

    def test_bad_config(self, session: PuzzleSession) -> None:
        data = session.snapshot()
        data["config"]["a"] = 40
        with pytest.raises(SnapshotError):
            session.restore(data)

    def test_missing_state(self, session: PuzzleSession) -> None:
        data = session.snapshot()
        del data["state"]
        with pytest.raises(SnapshotError):
            session.restore(data)

    def test_failed_restore_keeps_session(self, session: PuzzleSession) -> None:
        session.twist(Grip.A, 1)
        before = session.state.copy()
        data = session.snapshot()
        data["state"]["a_pieces"] = [0, 0, 0, 0, 0]
        with pytest.raises(SnapshotError):
            session.restore(data)
        assert session.state == before

    @pytest.mark.parametrize("data", [None, [], "x", 3])
    def test_snapshot_must_be_mapping(self, session: PuzzleSession, data) -> None:
        with pytest.raises(SnapshotError):
            session.restore(data)

    @pytest.mark.parametrize("part", ["config", "state"])
    @pytest.mark.parametrize("value", [None, [], "x"])
    def test_parts_must_be_mappings(self, session: PuzzleSession, part: str, value) -> None:
        data = session.snapshot()
        data[part] = value
        with pytest.raises(SnapshotError):
            session.restore(data)
        assert session.state == PuzzleState.new(session.config)
