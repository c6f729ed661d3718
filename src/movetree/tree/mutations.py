"""Tree mutations: moves, deletion, promotion, analysis and node markup.

Every mutation edits the :class:`TreeState` in place and reports what it
did as :class:`Applied` or :class:`Ignored`. Nothing here raises for bad
input; unplayable moves and unresolvable paths leave the state untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from chess import BLACK, WHITE, Color

from movetree.analysis import (
    Annotation,
    MoveAnalysis,
    Score,
    ScoreClassifier,
    classify_move,
)
from movetree.config import DEFAULT_CONFIG, TreeConfig
from movetree.rules import IllegalMoveError, IRules, MoveInput, PythonChessRules
from movetree.tree.models import Shape, TreeState, create_node
from movetree.tree.paths import clamp_path, is_prefix, resolve, resolve_strict

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Applied:
    """The mutation took effect; ``path`` addresses the affected node."""

    path: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class Ignored:
    """The mutation was a no-op."""

    reason: str


MutationOutcome = Applied | Ignored


def _ignored(reason: str, *args: object) -> Ignored:
    message = reason % args if args else reason
    _LOGGER.debug("Ignored: %s", message)
    return Ignored(message)


# ── Moves ────────────────────────────────────────────────────────────────────


def make_move(
    state: TreeState,
    move: MoveInput,
    rules: IRules | None = None,
) -> MutationOutcome:
    """Play *move* from the current node.

    An existing child reached by the same move is selected instead of
    adding a duplicate.
    """
    node = resolve(state.root, state.position)
    try:
        result = (rules or PythonChessRules()).apply(node.fen, move)
    except IllegalMoveError as exc:
        return _ignored("illegal move %s", exc)

    # The new path has to extend the node actually reached.
    state.position = clamp_path(state.root, state.position)
    for index, child in enumerate(node.children):
        if child.move is not None and child.move.san == result.move.san:
            state.position.append(index)
            return Applied(tuple(state.position))

    node.children.append(
        create_node(fen=result.fen, move=result.move, half_moves=node.half_moves + 1)
    )
    state.position.append(len(node.children) - 1)
    return Applied(tuple(state.position))


def make_moves(
    state: TreeState,
    moves: Iterable[MoveInput],
    rules: IRules | None = None,
) -> list[MutationOutcome]:
    """Play *moves* one after another from the current node."""
    validator = rules or PythonChessRules()
    return [make_move(state, move, validator) for move in moves]


# ── Structural edits ─────────────────────────────────────────────────────────


def delete_move(state: TreeState, path: Sequence[int]) -> MutationOutcome:
    """Remove the node at *path* together with its whole subtree."""
    path = list(path)
    if not path:
        return _ignored("the root cannot be deleted")
    parent = resolve_strict(state.root, path[:-1])
    if parent is None or not 0 <= path[-1] < len(parent.children):
        return _ignored("no node at %s", path)

    del parent.children[path[-1]]

    if is_prefix(path, state.position):
        state.position = path[:-1]
    elif is_prefix(path[:-1], state.position) and len(state.position) == len(path):
        # A sibling at the selection's depth went away.
        state.position[-1] = 0
    return Applied(tuple(path[:-1]))


def promote_variation(state: TreeState, path: Sequence[int]) -> MutationOutcome:
    """Move the deepest side variation on *path* one level toward the mainline.

    The variation becomes its parent's first child and the selection moves
    to the rewritten path. Repeated calls keep promoting toward the root.
    """
    promoted = list(path)
    depth = next(
        (i for i in range(len(promoted) - 1, -1, -1) if promoted[i] != 0), None
    )
    if depth is None:
        return _ignored("%s is already on the mainline", promoted)

    parent = resolve_strict(state.root, promoted[:depth])
    index = promoted[depth]
    if parent is None or not 0 <= index < len(parent.children):
        return _ignored("no variation at %s", promoted)

    parent.children.insert(0, parent.children.pop(index))
    promoted[depth] = 0
    state.position = promoted
    return Applied(tuple(promoted))


# ── Analysis ─────────────────────────────────────────────────────────────────


def _side_to_move(fen: str) -> Color:
    fields = fen.split()
    return BLACK if len(fields) > 1 and fields[1] == "b" else WHITE


def add_analysis(
    state: TreeState,
    analysis: Sequence[MoveAnalysis],
    classify: ScoreClassifier | None = None,
    config: TreeConfig | None = None,
) -> MutationOutcome:
    """Attach per-ply engine analysis to the mainline, ply by ply.

    Stops at whichever of the mainline and *analysis* runs out first.
    """
    classifier = classify or classify_move
    cfg = config or DEFAULT_CONFIG
    mover = _side_to_move(state.root.fen)
    previous: Score = cfg.baseline_score

    path: list[int] = []
    node = state.root
    for entry in analysis:
        if not node.children:
            break
        node = node.children[0]
        path.append(0)

        current = entry.best.score
        node.score = current
        node.depth = entry.best.depth
        if entry.novelty:
            node.comment_html = cfg.novelty_comment
            node.comment_text = cfg.novelty_comment
        node.annotation = classifier(previous, current, mover)

        previous = current
        mover = not mover

    if not path:
        return _ignored("no mainline move to annotate")
    return Applied(tuple(path))


# ── Node markup ──────────────────────────────────────────────────────────────


def toggle_annotation(state: TreeState, annotation: Annotation) -> MutationOutcome:
    """Set *annotation* on the current node, or clear it if already set."""
    node = resolve(state.root, state.position)
    if node.annotation == annotation:
        node.annotation = Annotation.NONE
    else:
        node.annotation = annotation
    return Applied(tuple(state.position))


def set_comment(state: TreeState, html: str, text: str) -> MutationOutcome:
    """Replace both comment representations of the current node."""
    node = resolve(state.root, state.position)
    node.comment_html = html
    node.comment_text = text
    return Applied(tuple(state.position))


def set_score(
    state: TreeState,
    score: Score,
    depth: int | None = None,
) -> MutationOutcome:
    """Store an engine evaluation on the current node."""
    node = resolve(state.root, state.position)
    node.score = score
    node.depth = depth
    return Applied(tuple(state.position))


def toggle_shape(state: TreeState, shapes: Sequence[Shape]) -> MutationOutcome:
    """Toggle the first of *shapes* on the current node.

    Shapes are matched on origin and destination only.
    """
    if not shapes:
        return _ignored("no shape supplied")
    shape = shapes[0]
    node = resolve(state.root, state.position)
    for index, existing in enumerate(node.shapes):
        if existing.key == shape.key:
            del node.shapes[index]
            break
    else:
        node.shapes.append(shape)
    return Applied(tuple(state.position))
