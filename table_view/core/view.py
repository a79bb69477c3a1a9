from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, FrozenSet, Hashable, Iterable, List, Optional, Sequence

from table_view.config_model import ViewConfig
from table_view.core.columns import Column, ColumnRegistry
from table_view.core.exceptions import ConfigurationError
from table_view.core.filtering import filter_rows
from table_view.core.identity import build_rows
from table_view.core.pagination import clamp_page_index, page_count, page_window, paginate
from table_view.core.selection import SelectionTracker
from table_view.core.sorting import next_sort_state, sort_rows
from table_view.core.state import (
    FilterState,
    PageState,
    Row,
    SelectionIndicator,
    SortDirection,
    SortState,
    ViewSlot,
    ViewSnapshot,
)
from table_view.validation.errors import ValidationIssue

logger = logging.getLogger(__name__)


class TableView:
    """
    Coordinator for one table view: owns query, sort, page and selection
    state and re-runs filter -> sort -> paginate on every change.

    Design Notes:
    - Every public mutation finishes recomputing before any callback fires,
      so callbacks always observe a consistent view
    - Each public call queues its own callbacks and delivers them in order; a
      callback that calls back into the view has that nested call fully
      processed (its own callbacks included) before control returns to it
    - Page and selection reports read the state at delivery time, and a page
      report is skipped if a nested call already reported that page
    - on_sort receives SortDirection.NONE when a three-state cycle turns the
      sort off, not only ASC/DESC
    - Selection works on the filtered+sorted rows, never just the visible page
    - The engine renders nothing; the caller reads page_rows / snapshot() and
      forwards UI events to the methods below
    """

    def __init__(
            self,
            data: Sequence[Any],
            columns: Iterable[Column],
            config: Optional[ViewConfig] = None,
            *,
            on_search: Optional[Callable[[str], None]] = None,
            on_sort: Optional[Callable[[str, SortDirection], None]] = None,
            on_selection_change: Optional[Callable[[FrozenSet[Hashable]], None]] = None,
            on_page_change: Optional[Callable[[int], None]] = None,
            on_row_click: Optional[Callable[[Any], None]] = None,
            is_loading: bool = False,
            is_error: bool = False,
    ) -> None:
        self.config = config or ViewConfig()
        self.columns = ColumnRegistry(columns, self.config)

        self.on_search = on_search
        self.on_sort = on_sort
        self.on_selection_change = on_selection_change
        self.on_page_change = on_page_change
        self.on_row_click = on_row_click

        self.is_loading = is_loading
        self.is_error = is_error

        self._filter = FilterState()
        self._sort = SortState()
        self._page = PageState(page_size=self.config.page_size)
        self._selection = SelectionTracker()

        self._get_value = self.columns.value_getter()
        self._searchable_keys = self.columns.searchable_keys()

        self._rows: List[Row] = build_rows(data, self.config.identity)
        self._filtered: List[Row] = []
        self._page_rows: List[Row] = []

        self._recompute()

        # Last values delivered to observers; reports are skipped when nothing moved
        self._reported_page = self._page.page_index
        self._reported_selection = self._selection.selected

    def __repr__(self) -> str:
        return (
            f"TableView(rows={len(self._rows)}, filtered={len(self._filtered)}, "
            f"page={self._page.page_index + 1}/{self.page_count}, selected={len(self._selection.selected)})"
        )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def _row_value(self, row: Row, key: str) -> Any:
        return self._get_value(row.record, key)

    def _recompute(self) -> bool:
        """
        Run filter -> sort -> paginate and resync the selection tracker.
        :return: True if the selection changed (hidden selections pruned)
        """
        filtered = filter_rows(self._rows, self._filter.query, self._searchable_keys, self._row_value)
        self._filtered = sort_rows(filtered, self._sort.key, self._sort.direction, self._row_value)

        if self.config.pagination:
            size = self._page.page_size
            self._page.page_index = clamp_page_index(self._page.page_index, len(self._filtered), size)
            self._page_rows = paginate(self._filtered, size, self._page.page_index)
        else:
            self._page.page_index = 0
            self._page_rows = list(self._filtered)

        pruned = self._selection.sync(
            (row.identity for row in self._filtered),
            prune=not self.config.retain_hidden_selection,
        )

        logger.debug(
            "Recomputed view: %d rows, %d filtered, page %d showing %d",
            len(self._rows),
            len(self._filtered),
            self._page.page_index,
            len(self._page_rows),
        )
        return pruned

    def _apply(self, batch: List[Callable[[], Any]], mutate: Callable[[], None]) -> None:
        """
        Mutate state, recompute, then add the follow-up page/selection reports
        to the caller's batch, after whatever the caller already queued.
        """
        mutate()
        pruned = self._recompute()

        if pruned and self.config.selectable:
            batch.append(partial(self._report_selection, False))
        batch.append(self._report_page)

    @staticmethod
    def _emit(batch: List[Callable[[], Any]], callback: Optional[Callable[..., Any]], *args: Any) -> None:
        if callback is not None:
            batch.append(partial(callback, *args))

    @staticmethod
    def _flush(batch: List[Callable[[], Any]]) -> None:
        # Each public call owns its batch, so a nested call delivers only its
        # own events; an exception drops the rest of this batch and propagates
        for event in batch:
            event()

    def _report_page(self) -> None:
        """Report the page as it is at delivery time, if it differs from the last report."""
        page_index = self._page.page_index
        if page_index == self._reported_page:
            return
        self._reported_page = page_index
        if self.on_page_change is not None:
            self.on_page_change(page_index)

    def _report_selection(self, force: bool = True) -> None:
        selected = self._selection.selected
        if not force and selected == self._reported_selection:
            return
        self._reported_selection = selected
        if self.on_selection_change is not None:
            self.on_selection_change(selected)

    # ------------------------------------------------------------------
    # Data / status
    # ------------------------------------------------------------------
    def set_data(self, data: Sequence[Any]) -> None:
        """Replace the dataset wholesale; query, sort and selection are kept."""

        def mutate() -> None:
            self._rows = build_rows(data, self.config.identity)

        batch: List[Callable[[], Any]] = []
        self._apply(batch, mutate)
        self._flush(batch)

    def set_status(self, is_loading: Optional[bool] = None, is_error: Optional[bool] = None) -> None:
        if is_loading is not None:
            self.is_loading = is_loading
        if is_error is not None:
            self.is_error = is_error

    @property
    def active_slot(self) -> ViewSlot:
        if self.is_error:
            return ViewSlot.ERROR
        if self.is_loading:
            return ViewSlot.LOADING
        if not self._rows:
            return ViewSlot.EMPTY
        return ViewSlot.TABLE

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def search(self, query: str) -> None:
        """Set the search query and return to the first page."""
        if not self.config.searchable:
            logger.debug("Search ignored: view is not searchable")
            return

        query = query or ""

        def mutate() -> None:
            self._filter.query = query
            self._page.page_index = 0

        batch: List[Callable[[], Any]] = []
        self._emit(batch, self.on_search, query)
        self._apply(batch, mutate)
        self._flush(batch)

    @property
    def query(self) -> str:
        return self._filter.query

    # ------------------------------------------------------------------
    # Sort
    # ------------------------------------------------------------------
    def toggle_sort(self, key: str) -> None:
        """
        Header click on column 'key'. Non-sortable or unknown columns are
        ignored without firing on_sort.
        """
        if not self.columns.is_sortable(key):
            logger.debug("Sort ignored: column %r is not sortable", key)
            return

        new_state = next_sort_state(self._sort, key, self.config.sort_cycle)

        def mutate() -> None:
            self._sort = new_state

        batch: List[Callable[[], Any]] = []
        self._emit(batch, self.on_sort, key, new_state.direction)
        self._apply(batch, mutate)
        self._flush(batch)

    @property
    def sort_state(self) -> SortState:
        return self._sort

    def sort_direction(self, key: str) -> SortDirection:
        return self._sort.direction_for(key)

    # ------------------------------------------------------------------
    # Pagination
    # ------------------------------------------------------------------
    def go_to_page(self, page_index: int) -> None:
        """
        Move to a 0-based page. Out-of-range targets are clamped; moving to the
        current page (or with pagination off) does nothing.
        """
        if not self.config.pagination:
            return

        target = clamp_page_index(page_index, len(self._filtered), self._page.page_size)
        if target == self._page.page_index:
            return

        def mutate() -> None:
            self._page.page_index = target

        batch: List[Callable[[], Any]] = []
        self._apply(batch, mutate)
        self._flush(batch)

    def next_page(self) -> None:
        self.go_to_page(self._page.page_index + 1)

    def previous_page(self) -> None:
        self.go_to_page(self._page.page_index - 1)

    def set_page_size(self, page_size: int) -> None:
        """
        Change the page size, keeping the first row of the current page visible.
        """
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
            raise ConfigurationError(
                [ValidationIssue("CONFIG_PAGE_SIZE", f"page_size must be a positive integer, got {page_size!r}.")]
            )

        first_row = self._page.page_index * self._page.page_size

        def mutate() -> None:
            self._page.page_size = page_size
            self._page.page_index = first_row // page_size

        batch: List[Callable[[], Any]] = []
        self._apply(batch, mutate)
        self._flush(batch)

    @property
    def page_index(self) -> int:
        return self._page.page_index

    @property
    def page_size(self) -> int:
        return self._page.page_size

    @property
    def page_count(self) -> int:
        if not self.config.pagination:
            return 1 if self._filtered else 0
        return page_count(len(self._filtered), self._page.page_size)

    def page_window(self) -> List[Any]:
        """1-based page numbers (with "..." markers) for a pager widget."""
        return page_window(self._page.page_index + 1, self.page_count)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def toggle_row(self, identity: Hashable) -> None:
        if not self.config.selectable:
            logger.debug("Selection ignored: view is not selectable")
            return

        self._selection.toggle_row(identity)
        self._flush([self._report_selection])

    def toggle_select_all(self) -> None:
        if not self.config.selectable:
            logger.debug("Select-all ignored: view is not selectable")
            return

        self._selection.toggle_select_all()
        self._flush([self._report_selection])

    def clear_selection(self) -> None:
        if not self.config.selectable:
            return

        self._selection.clear()
        self._flush([self._report_selection])

    @property
    def selection(self) -> FrozenSet[Hashable]:
        return self._selection.selected

    @property
    def selection_indicator(self) -> SelectionIndicator:
        return self._selection.indicator

    def is_selected(self, identity: Hashable) -> bool:
        return self._selection.is_selected(identity)

    # ------------------------------------------------------------------
    # Read access / pass-through
    # ------------------------------------------------------------------
    @property
    def rows(self) -> List[Row]:
        """Every row of the current dataset, in supplied order."""
        return list(self._rows)

    @property
    def filtered_rows(self) -> List[Row]:
        """Rows matching the query, in sorted order, before pagination."""
        return list(self._filtered)

    @property
    def page_rows(self) -> List[Row]:
        return list(self._page_rows)

    @property
    def page_records(self) -> List[Any]:
        return [row.record for row in self._page_rows]

    def cell_value(self, key: str, row: Any) -> Any:
        """Rendered cell for column 'key': the column's render() output or the raw value."""
        column = self.columns.get(key)
        record = row.record if isinstance(row, Row) else row
        if column is None:
            return None
        return column.cell(record)

    def activate_cell(self, key: str, row: Any) -> bool:
        """
        Forward a cell activation to the column's on_click handler.
        :return: True if a handler was invoked
        """
        column = self.columns.get(key)
        if column is None or column.on_click is None:
            return False
        column.on_click(row.record if isinstance(row, Row) else row)
        return True

    def activate_row(self, row: Any) -> bool:
        if self.on_row_click is None:
            return False
        self.on_row_click(row.record if isinstance(row, Row) else row)
        return True

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            slot=self.active_slot,
            query=self._filter.query,
            sort=self._sort,
            page_index=self._page.page_index,
            page_size=self._page.page_size,
            page_count=self.page_count,
            total_count=len(self._rows),
            filtered_count=len(self._filtered),
            rows=tuple(self._page_rows),
            selected=self._selection.selected,
            indicator=self._selection.indicator,
            page_window=tuple(self.page_window()),
        )
