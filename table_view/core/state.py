from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Hashable, Optional, Tuple, Union


class SortDirection(str, Enum):
    NONE = "none"
    DESC = "desc"
    ASC = "asc"


class SelectionIndicator(str, Enum):
    """Tri-state summary of the selection relative to the filtered set."""
    NONE = "none"
    PARTIAL = "partial"
    ALL = "all"


class ViewSlot(str, Enum):
    """Which mutually exclusive render slot the rendering layer should show."""
    ERROR = "error"
    LOADING = "loading"
    EMPTY = "empty"
    TABLE = "table"


@dataclass(frozen=True)
class Row:
    """
    A record paired with its identity and its position in the supplied dataset.

    The record itself is opaque to the engine; values are read through the
    column accessors.
    """
    identity: Hashable
    position: int
    record: Any


@dataclass(frozen=True)
class SortState:
    """
    Active sort column and direction. At most one column is active:
    key is None exactly when direction is NONE.
    """
    key: Optional[str] = None
    direction: SortDirection = SortDirection.NONE

    @property
    def is_active(self) -> bool:
        return self.direction is not SortDirection.NONE

    def direction_for(self, key: str) -> SortDirection:
        return self.direction if key == self.key else SortDirection.NONE


@dataclass
class FilterState:
    query: str = ""

    @property
    def is_blank(self) -> bool:
        return not self.query.strip()


@dataclass
class PageState:
    page_index: int = 0
    page_size: int = 10


@dataclass(frozen=True)
class ViewSnapshot:
    """
    Immutable read-only picture of a view after a recomputation, handed to
    the rendering layer.
    """
    slot: ViewSlot
    query: str
    sort: SortState
    page_index: int
    page_size: int
    page_count: int
    total_count: int
    filtered_count: int
    rows: Tuple[Row, ...]
    selected: FrozenSet[Hashable]
    indicator: SelectionIndicator
    page_window: Tuple[Union[int, str], ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slot": self.slot.value,
            "query": self.query,
            "sort": {"key": self.sort.key, "direction": self.sort.direction.value},
            "page_index": self.page_index,
            "page_size": self.page_size,
            "page_count": self.page_count,
            "total_count": self.total_count,
            "filtered_count": self.filtered_count,
            "row_ids": [row.identity for row in self.rows],
            "selected": list(self.selected),
            "indicator": self.indicator.value,
            "page_window": list(self.page_window),
        }
