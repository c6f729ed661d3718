"""Score classification: grade a move by the win chance it gives away."""

from __future__ import annotations

import math

from chess import WHITE, Color

from movetree.analysis.models import Annotation, Score, ScoreKind

_BLUNDER_MIN_DROP = 20.0
_MISTAKE_MIN_DROP = 10.0
_DUBIOUS_MIN_DROP = 5.0

# Cap centipawn values so mate scores map onto a finite win chance.
_CP_CAP = 1500
_WIN_CHANCE_SLOPE = 0.00368208


def _clamp_cp(cp: int) -> int:
    return max(-_CP_CAP, min(_CP_CAP, cp))


def score_to_cp(score: Score, color: Color = WHITE) -> int:
    """Centipawn value of *score* from *color*'s point of view."""
    if score.kind == ScoreKind.MATE:
        if score.value == 0:
            cp = 0
        else:
            cp = _CP_CAP if score.value > 0 else -_CP_CAP
    else:
        cp = _clamp_cp(score.value)
    return cp if color == WHITE else -cp


def win_chance(cp: int) -> float:
    """Winning chance in percent for a centipawn advantage.

    Logistic curve fitted on rated online games:
    ``50 + 50 * (2 / (1 + exp(-0.00368208 * cp)) - 1)``.
    """
    return 50 + 50 * (2 / (1 + math.exp(-_WIN_CHANCE_SLOPE * cp)) - 1)


def classify_move(previous: Score, current: Score, color: Color) -> Annotation:
    """Annotate the move *color* played between two evaluations."""
    drop = win_chance(score_to_cp(previous, color)) - win_chance(
        score_to_cp(current, color)
    )
    if drop > _BLUNDER_MIN_DROP:
        return Annotation.BLUNDER
    if drop > _MISTAKE_MIN_DROP:
        return Annotation.MISTAKE
    if drop > _DUBIOUS_MIN_DROP:
        return Annotation.DUBIOUS
    return Annotation.NONE
