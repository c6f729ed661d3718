"""Data models for engine scores and move annotations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ScoreKind(StrEnum):
    """Unit of an engine score."""

    CP = "cp"
    MATE = "mate"


class Annotation(StrEnum):
    """Symbolic move quality marker, valued by its NAG-style symbol."""

    NONE = ""
    GOOD = "!"
    BRILLIANT = "!!"
    MISTAKE = "?"
    BLUNDER = "??"
    DUBIOUS = "?!"
    INTERESTING = "!?"


@dataclass(slots=True, frozen=True)
class Score:
    """Engine evaluation, always from White's point of view."""

    kind: ScoreKind
    value: int

    @classmethod
    def cp(cls, value: int) -> Score:
        return cls(ScoreKind.CP, value)

    @classmethod
    def mate(cls, value: int) -> Score:
        return cls(ScoreKind.MATE, value)

    @classmethod
    def neutral(cls) -> Score:
        """Baseline used before the first analysed ply."""
        return cls(ScoreKind.CP, 0)


@dataclass(slots=True, frozen=True)
class BestMove:
    """Best line found by the engine for one ply."""

    score: Score
    depth: int | None = None
    san: str | None = None


@dataclass(slots=True, frozen=True)
class MoveAnalysis:
    """Per-ply analysis entry applied against the mainline."""

    best: BestMove
    novelty: bool = False
