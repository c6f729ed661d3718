"""Tree session configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from chess import STARTING_FEN

from movetree.analysis.models import Score


@dataclass(slots=True, frozen=True)
class TreeConfig:
    """Defaults applied when building trees and attaching analysis."""

    default_fen: str = STARTING_FEN
    novelty_comment: str = "Novelty"
    baseline_score: Score = field(default_factory=Score.neutral)


DEFAULT_CONFIG = TreeConfig()
