"""Rule-validation layer: turns move input into canonical moves and FENs."""

from movetree.rules.models import (
    CanonicalMove,
    IllegalMoveError,
    MoveInput,
    MoveResult,
    MoveSpec,
)
from movetree.rules.validator import IRules, PythonChessRules

__all__ = [
    "CanonicalMove",
    "IRules",
    "IllegalMoveError",
    "MoveInput",
    "MoveResult",
    "MoveSpec",
    "PythonChessRules",
]
