"""Tests for CommandQueue."""
from __future__ import annotations

from typing import Any

import pytest

from biaxe.commands import CommandQueue, ResetPuzzle, ScramblePuzzle, TwistCommand
from biaxe.types import Grip


@pytest.fixture
def queue() -> CommandQueue:
    return CommandQueue()


class TestQueueBasics:
    def test_empty_queue(self, queue: CommandQueue) -> None:
        assert queue.pending() == 0
        assert queue.drain() == []

    def test_enqueue_increments_pending(self, queue: CommandQueue) -> None:
        queue.enqueue(ResetPuzzle())
        queue.enqueue(TwistCommand(Grip.A, 1))
        assert queue.pending() == 2

    def test_commands_are_frozen(self) -> None:
        cmd = TwistCommand(Grip.B, -2)
        with pytest.raises(AttributeError):
            cmd.amount = 3  # type: ignore[misc]


class TestDrain:
    def test_fifo_order(self, queue: CommandQueue) -> None:
        seen: list[Any] = []

        def record(cmd: Any) -> bool:
            seen.append(cmd)
            return True

        queue.handle(TwistCommand, record)
        queue.handle(ResetPuzzle, record)
        cmds = [TwistCommand(Grip.A, 1), ResetPuzzle(), TwistCommand(Grip.B, -1)]
        for cmd in cmds:
            queue.enqueue(cmd)

        results = queue.drain()
        assert seen == cmds
        assert results == [(cmd, True) for cmd in cmds]
        assert queue.pending() == 0

    def test_rejection_reported(self, queue: CommandQueue) -> None:
        queue.handle(TwistCommand, lambda cmd: cmd.amount != 0)
        queue.enqueue(TwistCommand(Grip.A, 0))
        queue.enqueue(TwistCommand(Grip.A, 2))
        assert [accepted for _, accepted in queue.drain()] == [False, True]

    def test_later_handler_overwrites(self, queue: CommandQueue) -> None:
        calls: list[str] = []
        queue.handle(ResetPuzzle, lambda cmd: calls.append("h1") or True)
        queue.handle(ResetPuzzle, lambda cmd: calls.append("h2") or True)
        queue.enqueue(ResetPuzzle())
        queue.drain()
        assert calls == ["h2"]

    def test_unregistered_type_raises(self, queue: CommandQueue) -> None:
        queue.enqueue(ScramblePuzzle())
        with pytest.raises(TypeError, match="ScramblePuzzle"):
            queue.drain()
