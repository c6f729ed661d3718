"""The tree state-transition function.

``tree_reducer(state, action)`` is the single entry point the UI layer
calls. It either edits *state* in place and hands it back as
:class:`Mutated`, or builds a brand-new session and returns it as
:class:`Replaced`. Bad paths and illegal moves never raise; they leave the
state as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from movetree.analysis import ScoreClassifier
from movetree.config import DEFAULT_CONFIG, TreeConfig
from movetree.rules import IRules, PythonChessRules
from movetree.tree import mutations
from movetree.tree.actions import (
    AddAnalysis,
    DeleteMove,
    GoToEnd,
    GoToMove,
    GoToNext,
    GoToPrevious,
    GoToStart,
    MakeMove,
    MakeMoves,
    PromoteVariation,
    Reset,
    Save,
    SetAnnotation,
    SetComment,
    SetFen,
    SetHeaders,
    SetOrientation,
    SetOutcome,
    SetScore,
    SetShapes,
    SetStart,
    SetState,
    TreeAction,
)
from movetree.tree.models import TreeState, default_tree
from movetree.tree.paths import clamp_path, mainline_path, resolve

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class Mutated:
    """*state* is the session passed in, edited in place."""

    state: TreeState


@dataclass(slots=True, frozen=True)
class Replaced:
    """*state* is a new session; the previous one is discarded."""

    state: TreeState


TreeUpdate = Mutated | Replaced


class TreeReducer:
    """Applies :data:`TreeAction` values to tree sessions.

    Holds the collaborators used by move and analysis actions so callers
    can swap in their own rule validator or score classifier.
    """

    __slots__ = ("_classify", "_config", "_rules")

    def __init__(
        self,
        *,
        rules: IRules | None = None,
        classify: ScoreClassifier | None = None,
        config: TreeConfig | None = None,
    ) -> None:
        self._rules = rules or PythonChessRules()
        self._classify = classify
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> TreeConfig:
        return self._config

    def __call__(self, state: TreeState, action: TreeAction) -> TreeUpdate:
        handler = _HANDLERS.get(type(action))
        if handler is None:
            raise TypeError(f"Unknown tree action: {action!r}")
        _LOGGER.debug("Dispatching %s", type(action).__name__)
        return handler(self, state, action)

    # ── Session ──────────────────────────────────────────────────────────

    def _set_state(self, state: TreeState, action: SetState) -> TreeUpdate:
        state.dirty = False
        return Replaced(action.state)

    def _save(self, state: TreeState, action: Save) -> TreeUpdate:
        state.dirty = False
        return Mutated(state)

    def _reset(self, state: TreeState, action: Reset) -> TreeUpdate:
        fresh = default_tree(config=self._config)
        fresh.dirty = True
        return Replaced(fresh)

    def _set_fen(self, state: TreeState, action: SetFen) -> TreeUpdate:
        state.root = default_tree(action.fen, self._config).root
        state.headers.fen = state.root.fen
        state.position = []
        state.dirty = True
        return Mutated(state)

    # ── Headers ──────────────────────────────────────────────────────────

    def _set_headers(self, state: TreeState, action: SetHeaders) -> TreeUpdate:
        state.headers = action.headers
        state.dirty = True
        return Mutated(state)

    def _set_orientation(self, state: TreeState, action: SetOrientation) -> TreeUpdate:
        state.headers.orientation = action.orientation
        state.dirty = True
        return Mutated(state)

    def _set_start(self, state: TreeState, action: SetStart) -> TreeUpdate:
        state.headers.start = list(action.path)
        state.dirty = True
        return Mutated(state)

    def _set_outcome(self, state: TreeState, action: SetOutcome) -> TreeUpdate:
        state.headers.result = action.outcome
        state.dirty = True
        return Mutated(state)

    # ── Moves ────────────────────────────────────────────────────────────

    def _make_move(self, state: TreeState, action: MakeMove) -> TreeUpdate:
        outcome = mutations.make_move(state, action.move, self._rules)
        return self._mark(state, outcome)

    def _make_moves(self, state: TreeState, action: MakeMoves) -> TreeUpdate:
        outcomes = mutations.make_moves(state, action.moves, self._rules)
        for outcome in outcomes:
            self._mark(state, outcome)
        return Mutated(state)

    def _delete_move(self, state: TreeState, action: DeleteMove) -> TreeUpdate:
        path = state.position if action.path is None else action.path
        return self._mark(state, mutations.delete_move(state, path))

    def _promote_variation(
        self, state: TreeState, action: PromoteVariation
    ) -> TreeUpdate:
        return self._mark(state, mutations.promote_variation(state, action.path))

    # ── Navigation ───────────────────────────────────────────────────────

    def _go_to_start(self, state: TreeState, action: GoToStart) -> TreeUpdate:
        state.position = []
        return Mutated(state)

    def _go_to_end(self, state: TreeState, action: GoToEnd) -> TreeUpdate:
        state.position = mainline_path(state.root)
        return Mutated(state)

    def _go_to_next(self, state: TreeState, action: GoToNext) -> TreeUpdate:
        state.position = clamp_path(state.root, state.position)
        if resolve(state.root, state.position).children:
            state.position.append(0)
        return Mutated(state)

    def _go_to_previous(self, state: TreeState, action: GoToPrevious) -> TreeUpdate:
        if state.position:
            state.position.pop()
        return Mutated(state)

    def _go_to_move(self, state: TreeState, action: GoToMove) -> TreeUpdate:
        state.position = list(action.path)
        return Mutated(state)

    # ── Node markup ──────────────────────────────────────────────────────

    def _set_annotation(self, state: TreeState, action: SetAnnotation) -> TreeUpdate:
        return self._mark(state, mutations.toggle_annotation(state, action.annotation))

    def _set_comment(self, state: TreeState, action: SetComment) -> TreeUpdate:
        outcome = mutations.set_comment(state, action.html, action.text)
        return self._mark(state, outcome)

    def _set_score(self, state: TreeState, action: SetScore) -> TreeUpdate:
        outcome = mutations.set_score(state, action.score, action.depth)
        return self._mark(state, outcome)

    def _set_shapes(self, state: TreeState, action: SetShapes) -> TreeUpdate:
        return self._mark(state, mutations.toggle_shape(state, action.shapes))

    def _add_analysis(self, state: TreeState, action: AddAnalysis) -> TreeUpdate:
        outcome = mutations.add_analysis(
            state, action.analysis, self._classify, self._config
        )
        return self._mark(state, outcome)

    # ── Internal ─────────────────────────────────────────────────────────

    @staticmethod
    def _mark(state: TreeState, outcome: mutations.MutationOutcome) -> TreeUpdate:
        if isinstance(outcome, mutations.Applied):
            state.dirty = True
        return Mutated(state)


_HANDLERS: dict[type[Any], Callable[[TreeReducer, TreeState, Any], TreeUpdate]] = {
    SetState: TreeReducer._set_state,
    Save: TreeReducer._save,
    Reset: TreeReducer._reset,
    SetFen: TreeReducer._set_fen,
    SetHeaders: TreeReducer._set_headers,
    SetOrientation: TreeReducer._set_orientation,
    SetStart: TreeReducer._set_start,
    SetOutcome: TreeReducer._set_outcome,
    MakeMove: TreeReducer._make_move,
    MakeMoves: TreeReducer._make_moves,
    DeleteMove: TreeReducer._delete_move,
    PromoteVariation: TreeReducer._promote_variation,
    GoToStart: TreeReducer._go_to_start,
    GoToEnd: TreeReducer._go_to_end,
    GoToNext: TreeReducer._go_to_next,
    GoToPrevious: TreeReducer._go_to_previous,
    GoToMove: TreeReducer._go_to_move,
    SetAnnotation: TreeReducer._set_annotation,
    SetComment: TreeReducer._set_comment,
    SetScore: TreeReducer._set_score,
    SetShapes: TreeReducer._set_shapes,
    AddAnalysis: TreeReducer._add_analysis,
}


def tree_reducer(
    state: TreeState,
    action: TreeAction,
    *,
    rules: IRules | None = None,
    classify: ScoreClassifier | None = None,
    config: TreeConfig | None = None,
) -> TreeUpdate:
    """Apply *action* to *state* with one-off collaborators."""
    reducer = TreeReducer(rules=rules, classify=classify, config=config)
    return reducer(state, action)
