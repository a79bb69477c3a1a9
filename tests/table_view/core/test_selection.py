from __future__ import annotations

from table_view.core.selection import SelectionTracker, selection_indicator
from table_view.core.state import SelectionIndicator


def test_indicator_states():
    assert selection_indicator(set(), [1, 2]) is SelectionIndicator.NONE
    assert selection_indicator({3}, [1, 2]) is SelectionIndicator.NONE
    assert selection_indicator({1}, [1, 2]) is SelectionIndicator.PARTIAL
    assert selection_indicator({1, 2, 3}, [1, 2]) is SelectionIndicator.ALL
    # empty filtered set reports none
    assert selection_indicator({1}, []) is SelectionIndicator.NONE


def test_toggle_row_flips_membership():
    tracker = SelectionTracker()

    assert tracker.toggle_row("a") == frozenset({"a"})
    assert tracker.is_selected("a")
    assert tracker.toggle_row("a") == frozenset()


def test_select_all_uses_filtered_set_and_is_idempotent_in_pairs():
    tracker = SelectionTracker()
    tracker.sync([1, 2, 3])

    assert tracker.toggle_select_all() == frozenset({1, 2, 3})
    assert tracker.indicator is SelectionIndicator.ALL
    assert tracker.toggle_select_all() == frozenset()


def test_select_all_from_partial_selects_exactly_filtered():
    tracker = SelectionTracker()
    tracker.sync([1, 2, 3, 4])
    tracker.toggle_row(1)
    tracker.sync([3, 4])

    # 1 is hidden and retained, but select-all replaces it with the matches
    assert tracker.indicator is SelectionIndicator.NONE
    assert tracker.toggle_select_all() == frozenset({3, 4})


def test_hidden_selection_is_retained_by_default():
    tracker = SelectionTracker()
    tracker.sync([1, 2])
    tracker.toggle_row(1)

    changed = tracker.sync([2])

    assert changed is False
    assert tracker.selected == frozenset({1})

    tracker.sync([1, 2])
    assert tracker.indicator is SelectionIndicator.PARTIAL


def test_prune_drops_hidden_selection():
    tracker = SelectionTracker()
    tracker.sync([1, 2])
    tracker.toggle_row(1)
    tracker.toggle_row(2)

    changed = tracker.sync([2], prune=True)

    assert changed is True
    assert tracker.selected == frozenset({2})
    assert tracker.sync([2], prune=True) is False


def test_selected_is_an_immutable_copy():
    tracker = SelectionTracker()
    snapshot = tracker.toggle_row(1)
    tracker.toggle_row(2)

    assert snapshot == frozenset({1})
