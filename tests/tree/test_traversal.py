"""Tests for tree traversal helpers."""

from __future__ import annotations

from movetree.tree import TreeState, count_main_ply, iter_mainline, iter_tree, resolve
from movetree.tree.models import TreeNode


class TestIterTree:
    def test_single_root(self, tree: TreeState) -> None:
        entries = list(iter_tree(tree.root))
        assert len(entries) == 1
        assert entries[0].position == ()
        assert entries[0].node is tree.root

    def test_pre_order(self, branched_tree: TreeState) -> None:
        positions = [entry.position for entry in iter_tree(branched_tree.root)]
        assert positions == [(), (0,), (0, 0), (1,), (1, 0)]

    def test_every_path_resolves_to_its_node(self, branched_tree: TreeState) -> None:
        for entry in iter_tree(branched_tree.root):
            assert resolve(branched_tree.root, entry.position) is entry.node

    def test_each_call_starts_fresh(self, branched_tree: TreeState) -> None:
        first = iter_tree(branched_tree.root)
        next(first)
        next(first)
        second = list(iter_tree(branched_tree.root))
        assert len(second) == 5
        assert len(list(first)) == 3

    def test_deep_tree(self) -> None:
        root = TreeNode(fen="root")
        node = root
        for _ in range(3000):
            child = TreeNode(fen="x")
            node.children.append(child)
            node = child
        assert sum(1 for _ in iter_tree(root)) == 3001


class TestMainline:
    def test_count_main_ply_empty(self, tree: TreeState) -> None:
        assert count_main_ply(tree.root) == 0

    def test_count_main_ply_ignores_variations(
        self, branched_tree: TreeState
    ) -> None:
        assert count_main_ply(branched_tree.root) == 2

    def test_count_main_ply_long_line(self, tree: TreeState, play) -> None:
        state = play(tree, "e4", "e5", "Nf3", "Nc6", "Bb5")
        assert count_main_ply(state.root) == 5

    def test_iter_mainline_excludes_root(self, branched_tree: TreeState) -> None:
        sans = [node.san for node in iter_mainline(branched_tree.root)]
        assert sans == ["e4", "e5"]
