"""Lazy depth-first traversal of a move tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from movetree.tree.models import TreeNode


@dataclass(slots=True, frozen=True)
class TreeEntry:
    """A node together with its path from the traversal root."""

    position: tuple[int, ...]
    node: TreeNode


def iter_tree(root: TreeNode) -> Iterator[TreeEntry]:
    """Yield every node in pre-order, children in ascending index order.

    Uses an explicit stack so depth is not bounded by the recursion limit.
    """
    stack = [TreeEntry((), root)]
    while stack:
        entry = stack.pop()
        yield entry
        children = entry.node.children
        for index in range(len(children) - 1, -1, -1):
            stack.append(TreeEntry((*entry.position, index), children[index]))


def iter_mainline(root: TreeNode) -> Iterator[TreeNode]:
    """Yield the mainline nodes below *root* (the root itself excluded)."""
    node = root
    while node.children:
        node = node.children[0]
        yield node


def count_main_ply(node: TreeNode) -> int:
    """Number of half-moves on the mainline below *node*."""
    return sum(1 for _ in iter_mainline(node))
