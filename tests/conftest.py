"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

from movetree.tree import MakeMove, TreeState, default_tree, tree_reducer  # noqa: E402


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


PlayFn = Callable[..., TreeState]


def _play(state: TreeState, *moves: str) -> TreeState:
    for san in moves:
        state = tree_reducer(state, MakeMove(san)).state
    return state


@pytest.fixture
def play() -> PlayFn:
    """Play SAN moves from the current node through the reducer."""
    return _play


@pytest.fixture
def tree() -> TreeState:
    """Fresh tree at the standard starting position."""
    return default_tree()


@pytest.fixture
def branched_tree() -> TreeState:
    """root → e4 → e5, root → d4 → d5, selection back at the root.

    ``root.children`` is ``[e4, d4]``.
    """
    state = _play(default_tree(), "e4", "e5")
    state.position = []
    state = _play(state, "d4", "d5")
    state.position = []
    state.dirty = False
    return state
