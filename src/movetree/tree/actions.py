"""Actions accepted by :func:`movetree.tree.reducer.tree_reducer`."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from movetree.analysis.models import Annotation, MoveAnalysis, Score
from movetree.rules.models import MoveInput
from movetree.tree.models import GameHeaders, Orientation, Outcome, Shape, TreeState

# ── Session ──────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class Save:
    """The tree was persisted; clears the dirty flag."""


@dataclass(slots=True, frozen=True)
class SetState:
    """Replace the whole session, e.g. after loading another game."""

    state: TreeState


@dataclass(slots=True, frozen=True)
class Reset:
    """Start over from the default position."""


@dataclass(slots=True, frozen=True)
class SetFen:
    """Discard the tree and restart it from *fen*."""

    fen: str


# ── Headers ──────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class SetHeaders:
    headers: GameHeaders


@dataclass(slots=True, frozen=True)
class SetOrientation:
    orientation: Orientation


@dataclass(slots=True, frozen=True)
class SetStart:
    """Remember the repertoire's starting path."""

    path: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class SetOutcome:
    outcome: Outcome


# ── Moves ────────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class MakeMove:
    move: MoveInput


@dataclass(slots=True, frozen=True)
class MakeMoves:
    moves: Sequence[MoveInput]


@dataclass(slots=True, frozen=True)
class DeleteMove:
    """Delete the node at *path*, or the current node when omitted."""

    path: tuple[int, ...] | None = None


@dataclass(slots=True, frozen=True)
class PromoteVariation:
    path: tuple[int, ...]


# ── Navigation ───────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class GoToStart:
    pass


@dataclass(slots=True, frozen=True)
class GoToEnd:
    """Jump to the last mainline node."""


@dataclass(slots=True, frozen=True)
class GoToNext:
    """Step into the mainline continuation of the current node."""


@dataclass(slots=True, frozen=True)
class GoToPrevious:
    pass


@dataclass(slots=True, frozen=True)
class GoToMove:
    path: tuple[int, ...]


# ── Node markup ──────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class SetAnnotation:
    """Toggle *annotation* on the current node."""

    annotation: Annotation


@dataclass(slots=True, frozen=True)
class SetComment:
    html: str
    text: str


@dataclass(slots=True, frozen=True)
class SetScore:
    score: Score
    depth: int | None = None


@dataclass(slots=True, frozen=True)
class SetShapes:
    """Toggle the first of *shapes* on the current node."""

    shapes: Sequence[Shape]


@dataclass(slots=True, frozen=True)
class AddAnalysis:
    analysis: Sequence[MoveAnalysis]


TreeAction = (
    Save
    | SetState
    | Reset
    | SetFen
    | SetHeaders
    | SetOrientation
    | SetStart
    | SetOutcome
    | MakeMove
    | MakeMoves
    | DeleteMove
    | PromoteVariation
    | GoToStart
    | GoToEnd
    | GoToNext
    | GoToPrevious
    | GoToMove
    | SetAnnotation
    | SetComment
    | SetScore
    | SetShapes
    | AddAnalysis
)
