"""Qt bridge exposing the tree reducer to a UI as a signalling store."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from movetree.analysis import ScoreClassifier
from movetree.config import TreeConfig
from movetree.rules import IRules
from movetree.tree.actions import TreeAction
from movetree.tree.models import TreeState, default_tree
from movetree.tree.reducer import Replaced, TreeReducer


class TreeStore(QObject):
    """Owns the live :class:`TreeState` of one editing session.

    Widgets call :meth:`dispatch` and listen to ``state_changed``; views
    that cache nodes should also rebuild on ``state_replaced``.
    """

    state_changed = pyqtSignal(object)
    state_replaced = pyqtSignal(object)

    __slots__ = ("_reducer", "_state")

    def __init__(
        self,
        state: TreeState | None = None,
        *,
        rules: IRules | None = None,
        classify: ScoreClassifier | None = None,
        config: TreeConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._reducer = TreeReducer(rules=rules, classify=classify, config=config)
        self._state = state or default_tree(config=self._reducer.config)

    @property
    def state(self) -> TreeState:
        return self._state

    @property
    def dirty(self) -> bool:
        return self._state.dirty

    @pyqtSlot(object)
    def dispatch(self, action: TreeAction) -> None:
        """Apply *action* and notify listeners."""
        update = self._reducer(self._state, action)
        self._state = update.state
        if isinstance(update, Replaced):
            self.state_replaced.emit(self._state)
        self.state_changed.emit(self._state)
