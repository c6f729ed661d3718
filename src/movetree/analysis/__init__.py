"""Engine scores, per-ply analysis entries and move classification."""

from collections.abc import Callable

from chess import Color

from movetree.analysis.models import (
    Annotation,
    BestMove,
    MoveAnalysis,
    Score,
    ScoreKind,
)
from movetree.analysis.scoring import classify_move, score_to_cp, win_chance

ScoreClassifier = Callable[[Score, Score, Color], Annotation]

__all__ = [
    "Annotation",
    "BestMove",
    "MoveAnalysis",
    "Score",
    "ScoreClassifier",
    "ScoreKind",
    "classify_move",
    "score_to_cp",
    "win_chance",
]
