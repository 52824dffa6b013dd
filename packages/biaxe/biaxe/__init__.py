"""biaxe - Sphenic Biaxe two-disk twisty puzzle core."""
from __future__ import annotations

from biaxe.animation import TwistAnimation, TwistAnimationState
from biaxe.commands import (
    CommandQueue,
    Reconfigure,
    ResetPuzzle,
    ScramblePuzzle,
    TwistCommand,
)
from biaxe.config import PuzzleConfig
from biaxe.controller import ControlResult, DragState, InputBatch, interpret
from biaxe.prefs import Preferences
from biaxe.scramble import scramble
from biaxe.session import PuzzleSession
from biaxe.state import PuzzleState
from biaxe.types import Grip, InvariantError, SnapshotError, TwistKey
from biaxe.view import GripView, Polygon, PuzzleFrame, build_frame

__all__ = [
    "PuzzleConfig",
    "PuzzleState",
    "PuzzleSession",
    "Preferences",
    "Grip",
    "TwistKey",
    "TwistAnimation",
    "TwistAnimationState",
    "CommandQueue",
    "TwistCommand",
    "ResetPuzzle",
    "ScramblePuzzle",
    "Reconfigure",
    "InputBatch",
    "DragState",
    "ControlResult",
    "interpret",
    "scramble",
    "build_frame",
    "PuzzleFrame",
    "GripView",
    "Polygon",
    "InvariantError",
    "SnapshotError",
]
