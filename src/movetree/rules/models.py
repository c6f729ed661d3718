"""Move descriptors exchanged with the rule-validation layer."""

from __future__ import annotations

from dataclasses import dataclass


class IllegalMoveError(ValueError):
    """Raised when a move cannot be played in the given position."""


@dataclass(slots=True, frozen=True)
class MoveSpec:
    """A move given by origin/destination squares, e.g. from a board drag."""

    from_square: str
    to_square: str
    promotion: str | None = None


MoveInput = MoveSpec | str


@dataclass(slots=True, frozen=True)
class CanonicalMove:
    """A validated move as recorded on a tree node."""

    san: str
    uci: str
    from_square: str
    to_square: str
    promotion: str | None = None
    was_capture: bool = False
    was_check: bool = False


@dataclass(slots=True, frozen=True)
class MoveResult:
    """Outcome of a legal move: the canonical move and the FEN after it."""

    move: CanonicalMove
    fen: str
