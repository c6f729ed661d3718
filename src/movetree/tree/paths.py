"""Path addressing: locate nodes by their chain of child indices."""

from __future__ import annotations

from collections.abc import Sequence

from movetree.tree.models import TreeNode

Path = list[int]


def resolve(root: TreeNode, path: Sequence[int]) -> TreeNode:
    """Return the node at *path*, or the deepest ancestor reachable.

    Never fails: an out-of-range index stops the walk at the current node
    and the empty path yields *root*.
    """
    node = root
    for index in path:
        if not 0 <= index < len(node.children):
            break
        node = node.children[index]
    return node


def resolve_strict(root: TreeNode, path: Sequence[int]) -> TreeNode | None:
    """Return the node at *path*, or ``None`` if any index is out of range."""
    node = root
    for index in path:
        if not 0 <= index < len(node.children):
            return None
        node = node.children[index]
    return node


def clamp_path(root: TreeNode, path: Sequence[int]) -> Path:
    """The longest prefix of *path* that addresses an existing node."""
    valid: Path = []
    node = root
    for index in path:
        if not 0 <= index < len(node.children):
            break
        valid.append(index)
        node = node.children[index]
    return valid


def is_prefix(prefix: Sequence[int], path: Sequence[int]) -> bool:
    """True if *path* starts with *prefix* (equal paths included)."""
    if len(prefix) > len(path):
        return False
    return all(a == b for a, b in zip(prefix, path))


def mainline_path(root: TreeNode) -> Path:
    """Path to the last node of the mainline."""
    path: Path = []
    node = root
    while node.children:
        path.append(0)
        node = node.children[0]
    return path
