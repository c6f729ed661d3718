"""Editable move tree: model, path addressing, mutations and the reducer.

Quick start::

    from movetree.tree import MakeMove, default_tree, tree_reducer

    state = default_tree()
    state = tree_reducer(state, MakeMove("e4")).state
    print(state.position)  # [0]
"""

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
from movetree.tree.models import (
    GameHeaders,
    Orientation,
    Outcome,
    Shape,
    TreeNode,
    TreeState,
    create_node,
    default_tree,
)
from movetree.tree.mutations import Applied, Ignored, MutationOutcome
from movetree.tree.paths import clamp_path, is_prefix, mainline_path, resolve
from movetree.tree.reducer import (
    Mutated,
    Replaced,
    TreeReducer,
    TreeUpdate,
    tree_reducer,
)
from movetree.tree.traversal import TreeEntry, count_main_ply, iter_mainline, iter_tree

__all__ = [
    # Model
    "GameHeaders",
    "Orientation",
    "Outcome",
    "Shape",
    "TreeNode",
    "TreeState",
    "create_node",
    "default_tree",
    # Paths / traversal
    "TreeEntry",
    "clamp_path",
    "count_main_ply",
    "is_prefix",
    "iter_mainline",
    "iter_tree",
    "mainline_path",
    "resolve",
    # Mutation outcomes
    "Applied",
    "Ignored",
    "MutationOutcome",
    # Reducer
    "Mutated",
    "Replaced",
    "TreeReducer",
    "TreeUpdate",
    "tree_reducer",
    # Actions
    "AddAnalysis",
    "DeleteMove",
    "GoToEnd",
    "GoToMove",
    "GoToNext",
    "GoToPrevious",
    "GoToStart",
    "MakeMove",
    "MakeMoves",
    "PromoteVariation",
    "Reset",
    "Save",
    "SetAnnotation",
    "SetComment",
    "SetFen",
    "SetHeaders",
    "SetOrientation",
    "SetOutcome",
    "SetScore",
    "SetShapes",
    "SetStart",
    "SetState",
    "TreeAction",
]
