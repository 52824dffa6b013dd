"""Session commands and the queue that routes them between frames."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable

from biaxe.config import PuzzleConfig
from biaxe.types import Grip


@dataclass(frozen=True, slots=True)
class TwistCommand:
    """Twist *grip* by *amount* sectors; positive amounts are clockwise.

    ``initial_angle`` is where the disk visually sits when the twist starts,
    nonzero only when a drag is released mid-rotation.
    """

    grip: Grip
    amount: int
    initial_angle: float = 0.0


@dataclass(frozen=True, slots=True)
class ResetPuzzle:
    pass


@dataclass(frozen=True, slots=True)
class ScramblePuzzle:
    pass


@dataclass(frozen=True, slots=True)
class Reconfigure:
    config: PuzzleConfig


class CommandQueue:
    """Routes commands to typed handlers in FIFO order.

    Commands are frozen dataclasses, one handler per command class,
    dispatched by type.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {}
        self._pending: deque[Any] = deque()

    def handle(self, cmd_type: type[Any], handler: Callable[[Any], bool]) -> None:
        """Register ``handler(cmd) -> bool`` for a command type.

        Return True to accept, False to reject.  Later calls overwrite.
        """
        self._handlers[cmd_type] = handler

    def enqueue(self, cmd: Any) -> None:
        """Add a command to the queue.  Safe to call between frames."""
        self._pending.append(cmd)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self) -> list[tuple[Any, bool]]:
        """Process all pending commands.  Returns ``[(cmd, accepted), ...]``.

        Raises ``TypeError`` if no handler is registered for a command's type.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            cmd = self._pending.popleft()
            handler = self._handlers.get(type(cmd))
            if handler is None:
                raise TypeError(f"No handler registered for {type(cmd).__qualname__}")
            results.append((cmd, handler(cmd)))
        return results
