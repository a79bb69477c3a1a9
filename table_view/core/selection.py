from __future__ import annotations

import logging
from typing import FrozenSet, Hashable, Iterable, Set

from table_view.core.state import SelectionIndicator

logger = logging.getLogger(__name__)


def selection_indicator(selected: Iterable[Hashable], filtered_ids: Iterable[Hashable]) -> SelectionIndicator:
    """
    Tri-state summary of 'selected' relative to the filtered set.

    NONE is checked first, so an empty filtered set always reports NONE.
    """
    selected = set(selected)
    filtered = set(filtered_ids)

    if not (selected & filtered):
        return SelectionIndicator.NONE
    if filtered <= selected:
        return SelectionIndicator.ALL
    return SelectionIndicator.PARTIAL


class SelectionTracker:
    """
    Holds the selected row identities for one view.

    The tracker never looks at the visible page. Select-all acts on every
    row matching the current filter, and identities that the filter hides
    stay selected unless explicitly pruned, so clearing a search brings the
    earlier selections back.
    """

    def __init__(self) -> None:
        self._selected: Set[Hashable] = set()
        self._filtered_ids: list[Hashable] = []

    @property
    def selected(self) -> FrozenSet[Hashable]:
        return frozenset(self._selected)

    @property
    def indicator(self) -> SelectionIndicator:
        return selection_indicator(self._selected, self._filtered_ids)

    def is_selected(self, identity: Hashable) -> bool:
        return identity in self._selected

    def sync(self, filtered_ids: Iterable[Hashable], prune: bool = False) -> bool:
        """
        Point the tracker at the current filtered set.

        :param filtered_ids: identities of the filtered (unpaginated) rows
        :param prune: drop selected identities outside the filtered set
        :return: True if pruning changed the selection
        """
        self._filtered_ids = list(filtered_ids)
        if not prune:
            return False

        kept = self._selected & set(self._filtered_ids)
        if kept == self._selected:
            return False

        logger.debug("Pruned %d hidden selections", len(self._selected) - len(kept))
        self._selected = kept
        return True

    def toggle_row(self, identity: Hashable) -> FrozenSet[Hashable]:
        if identity in self._selected:
            self._selected.discard(identity)
        else:
            self._selected.add(identity)
        return self.selected

    def toggle_select_all(self) -> FrozenSet[Hashable]:
        """
        Clear everything if every filtered row is selected, otherwise select
        exactly the filtered rows.
        """
        if self.indicator is SelectionIndicator.ALL:
            self._selected = set()
        else:
            self._selected = set(self._filtered_ids)
        return self.selected

    def clear(self) -> FrozenSet[Hashable]:
        self._selected = set()
        return self.selected
