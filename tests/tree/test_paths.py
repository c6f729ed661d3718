"""Tests for path addressing."""

from __future__ import annotations

from movetree.tree import TreeState, clamp_path, is_prefix, mainline_path, resolve
from movetree.tree.models import TreeNode
from movetree.tree.paths import resolve_strict


def _deep_chain(length: int) -> TreeNode:
    root = TreeNode(fen="root")
    node = root
    for _ in range(length):
        child = TreeNode(fen="x", half_moves=node.half_moves + 1)
        node.children.append(child)
        node = child
    return root


class TestResolve:
    def test_empty_path_is_root(self, tree: TreeState) -> None:
        assert resolve(tree.root, []) is tree.root

    def test_valid_path(self, branched_tree: TreeState) -> None:
        node = resolve(branched_tree.root, [1, 0])
        assert node.san == "d5"

    def test_out_of_range_stops_at_deepest_ancestor(
        self, branched_tree: TreeState
    ) -> None:
        e4 = branched_tree.root.children[0]
        assert resolve(branched_tree.root, [0, 5, 0]) is e4
        assert resolve(branched_tree.root, [7]) is branched_tree.root

    def test_negative_index_is_out_of_range(self, branched_tree: TreeState) -> None:
        assert resolve(branched_tree.root, [-1]) is branched_tree.root

    def test_deep_tree_does_not_recurse(self) -> None:
        root = _deep_chain(5000)
        node = resolve(root, [0] * 5000)
        assert node.half_moves == 5000


class TestResolveStrict:
    def test_returns_none_for_bad_path(self, branched_tree: TreeState) -> None:
        assert resolve_strict(branched_tree.root, [0, 3]) is None

    def test_returns_node_for_good_path(self, branched_tree: TreeState) -> None:
        node = resolve_strict(branched_tree.root, [0, 0])
        assert node is not None
        assert node.san == "e5"


class TestPathHelpers:
    def test_clamp_path(self, branched_tree: TreeState) -> None:
        assert clamp_path(branched_tree.root, [1, 0, 4, 0]) == [1, 0]
        assert clamp_path(branched_tree.root, [9]) == []

    def test_is_prefix(self) -> None:
        assert is_prefix([], [1, 2])
        assert is_prefix([1], [1, 2])
        assert is_prefix([1, 2], [1, 2])
        assert not is_prefix([1, 2], [1])
        assert not is_prefix([0], [1, 2])

    def test_mainline_path(self, branched_tree: TreeState) -> None:
        assert mainline_path(branched_tree.root) == [0, 0]
        assert mainline_path(TreeNode(fen="lonely")) == []
