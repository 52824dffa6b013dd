"""PuzzleState - the piece permutation of both disks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from biaxe.config import PuzzleConfig
from biaxe.types import Grip, InvariantError, SnapshotError


def _rotate_right(seq: list[int], k: int) -> list[int]:
    if k == 0:
        return list(seq)
    return seq[-k:] + seq[:-k]


def _is_rotation(old: list[int], new: list[int]) -> bool:
    if len(old) != len(new):
        return False
    if not old:
        return True
    doubled = old + old
    n = len(old)
    return any(doubled[i : i + n] == new for i in range(n))


def _solved_pieces(a: int, b: int) -> tuple[list[int], list[int]]:
    a_pieces = list(range(a))
    b_pieces = list(range(a - 1, a - 1 + b))
    b_pieces[0] = 0
    return a_pieces, b_pieces


@dataclass(slots=True)
class PuzzleState:
    """Which piece sits in which cell of each disk.

    Index 0 of both ``a_pieces`` and ``b_pieces`` is the single cell shared
    by the two disks, so those two entries always hold the same identifier.
    The rotation counters only drive sector coloring.
    """

    a_rot: int
    b_rot: int
    a_pieces: list[int]
    b_pieces: list[int]

    @classmethod
    def new(cls, config: PuzzleConfig) -> PuzzleState:
        a_pieces, b_pieces = _solved_pieces(config.a, config.b)
        return cls(a_rot=0, b_rot=0, a_pieces=a_pieces, b_pieces=b_pieces)

    @property
    def a(self) -> int:
        return len(self.a_pieces)

    @property
    def b(self) -> int:
        return len(self.b_pieces)

    def n(self, grip: Grip) -> int:
        return self.a if grip is Grip.A else self.b

    def pieces(self, grip: Grip) -> list[int]:
        return self.a_pieces if grip is Grip.A else self.b_pieces

    def rot(self, grip: Grip) -> int:
        return self.a_rot if grip is Grip.A else self.b_rot

    def copy(self) -> PuzzleState:
        return PuzzleState(
            a_rot=self.a_rot,
            b_rot=self.b_rot,
            a_pieces=list(self.a_pieces),
            b_pieces=list(self.b_pieces),
        )

    # -- twisting ----------------------------------------------------------

    def twist_cw(self, grip: Grip, amount: int = 1) -> None:
        """Rotate *grip* clockwise: cell ``i`` receives the piece from ``i - amount``."""
        self._twist(grip, amount % self.n(grip))

    def twist_ccw(self, grip: Grip, amount: int = 1) -> None:
        """Rotate *grip* counterclockwise: cell ``i`` receives the piece from ``i + amount``."""
        self._twist(grip, -amount % self.n(grip))

    def twist(self, grip: Grip, amount: int) -> None:
        """Signed twist; positive amounts are clockwise."""
        if amount >= 0:
            self.twist_cw(grip, amount)
        else:
            self.twist_ccw(grip, -amount)

    def _twist(self, grip: Grip, shift: int) -> None:
        n = self.n(grip)
        old = self.pieces(grip)
        new = _rotate_right(old, shift)
        if not _is_rotation(old, new):
            raise InvariantError(f"twist of grip {grip.value} reordered pieces: {old} -> {new}")

        if grip is Grip.A:
            self.a_pieces = new
            self.a_rot = (self.a_rot - shift) % n
        else:
            self.b_pieces = new
            self.b_rot = (self.b_rot - shift) % n

        shared = new[0]
        self.a_pieces[0] = shared
        self.b_pieces[0] = shared
        if self.a_pieces[0] != self.b_pieces[0]:
            raise InvariantError("shared cell holds different pieces on each grip")

    # -- queries -----------------------------------------------------------

    def is_solved(self, config: PuzzleConfig) -> bool:
        a_pieces, b_pieces = _solved_pieces(config.a, config.b)
        return self.a_pieces == a_pieces and self.b_pieces == b_pieces

    def check_invariants(self) -> None:
        """Raise :class:`InvariantError` if the state is structurally broken."""
        if not self.a_pieces or not self.b_pieces:
            raise InvariantError("piece arrays must not be empty")
        if self.a_pieces[0] != self.b_pieces[0]:
            raise InvariantError(
                f"shared cell mismatch: A has {self.a_pieces[0]}, B has {self.b_pieces[0]}"
            )
        identifiers = sorted(self.a_pieces + self.b_pieces[1:])
        if identifiers != list(range(self.a + self.b - 1)):
            raise InvariantError(f"piece identifiers are not a permutation: {identifiers}")
        if not (0 <= self.a_rot < self.a and 0 <= self.b_rot < self.b):
            raise InvariantError(f"rotation counters out of range: {self.a_rot}, {self.b_rot}")

    # -- persistence -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "a_rot": self.a_rot,
            "b_rot": self.b_rot,
            "a_pieces": list(self.a_pieces),
            "b_pieces": list(self.b_pieces),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], config: PuzzleConfig) -> PuzzleState:
        for key in ("a_pieces", "b_pieces"):
            if not isinstance(data.get(key), (list, tuple)):
                raise SnapshotError(f"Malformed puzzle state: {key} must be a list")
        try:
            state = cls(
                a_rot=int(data["a_rot"]),
                b_rot=int(data["b_rot"]),
                a_pieces=[int(p) for p in data["a_pieces"]],
                b_pieces=[int(p) for p in data["b_pieces"]],
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed puzzle state: {exc}") from exc

        if state.a != config.a or state.b != config.b:
            raise SnapshotError(
                f"State sizes ({state.a}, {state.b}) do not match config ({config.a}, {config.b})"
            )
        try:
            state.check_invariants()
        except InvariantError as exc:
            raise SnapshotError(f"Invalid puzzle state: {exc}") from exc
        return state
