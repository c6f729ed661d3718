"""movetree: an editable, branching tree of chess positions."""

from movetree.config import DEFAULT_CONFIG, TreeConfig
from movetree.tree import TreeNode, TreeState, default_tree, tree_reducer

__all__ = [
    "DEFAULT_CONFIG",
    "TreeConfig",
    "TreeNode",
    "TreeState",
    "default_tree",
    "tree_reducer",
]

__version__ = "0.1.0"
