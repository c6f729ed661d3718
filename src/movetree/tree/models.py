"""Tree entities: nodes, game headers and the editable tree session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from movetree.analysis.models import Annotation, Score
from movetree.config import DEFAULT_CONFIG, TreeConfig
from movetree.rules.models import CanonicalMove


class Outcome(StrEnum):
    """Game result as a PGN result token."""

    UNKNOWN = "*"
    WHITE_WIN = "1-0"
    BLACK_WIN = "0-1"
    DRAW = "1/2-1/2"


class Orientation(StrEnum):
    """Board side shown at the bottom (repertoire files)."""

    WHITE = "white"
    BLACK = "black"


@dataclass(slots=True, frozen=True)
class Shape:
    """An arrow (``orig`` → ``dest``) or a circled square (``dest`` is None)."""

    orig: str
    dest: str | None = None
    brush: str = "green"

    @property
    def key(self) -> tuple[str, str | None]:
        """Identity used when toggling; the brush is ignored."""
        return self.orig, self.dest


@dataclass
class TreeNode:
    """One position in the tree.

    ``children[0]`` continues the mainline, the rest are side variations
    in order of preference.
    """

    fen: str
    move: CanonicalMove | None = None
    children: list[TreeNode] = field(default_factory=list)
    score: Score | None = None
    depth: int | None = None
    half_moves: int = 0
    shapes: list[Shape] = field(default_factory=list)
    annotation: Annotation = Annotation.NONE
    comment_html: str = ""
    comment_text: str = ""

    @property
    def is_root(self) -> bool:
        return self.move is None

    @property
    def san(self) -> str | None:
        return self.move.san if self.move is not None else None


@dataclass
class GameHeaders:
    """Game metadata. ``start`` and ``orientation`` are repertoire-only."""

    id: int = 0
    fen: str = DEFAULT_CONFIG.default_fen
    event: str = ""
    site: str = ""
    date: str | None = None
    time: str | None = None
    round: str | None = None
    white: str = ""
    white_elo: int | None = None
    black: str = ""
    black_elo: int | None = None
    result: Outcome = Outcome.UNKNOWN
    time_control: str | None = None
    eco: str | None = None
    white_material: int | None = None
    black_material: int | None = None
    start: list[int] | None = None
    orientation: Orientation | None = None


@dataclass
class TreeState:
    """One editable tree session.

    ``position`` is the path of child indices from the root to the selected
    node; ``dirty`` is set by every content change and cleared on save.
    """

    root: TreeNode
    headers: GameHeaders = field(default_factory=GameHeaders)
    position: list[int] = field(default_factory=list)
    dirty: bool = False


def create_node(*, fen: str, move: CanonicalMove, half_moves: int) -> TreeNode:
    """Build a fresh child node with no evaluation, shapes or comment."""
    return TreeNode(fen=fen, move=move, half_moves=half_moves)


def default_tree(fen: str | None = None, config: TreeConfig | None = None) -> TreeState:
    """Start a tree session at *fen* (the standard start position by default)."""
    cfg = config or DEFAULT_CONFIG
    start_fen = fen or cfg.default_fen
    return TreeState(
        root=TreeNode(fen=start_fen),
        headers=GameHeaders(fen=start_fen),
    )
