from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Hashable, Optional

DEFAULT_PAGE_SIZE = 10

IdentityFn = Callable[[Any], Hashable]


@dataclass
class ViewConfig:
    """
    Behavioural switches for a single table view.

    Fields:

    - searchable: when False, search requests are ignored and the query stays blank
    - selectable: when False, row/select-all toggles are ignored
    - pagination: when False, the whole filtered+sorted set is the page
    - page_size: rows per page, only used when pagination is enabled
    - sort_cycle: "three_state" (none -> desc -> asc -> none) or "two_state" (desc <-> asc)
    - retain_hidden_selection: keep selected ids that the current query hides
    - identity: optional record -> identity function, defaults to record 'id' or position
    """

    searchable: bool = True
    selectable: bool = True
    pagination: bool = True
    page_size: int = DEFAULT_PAGE_SIZE
    sort_cycle: str = "three_state"
    retain_hidden_selection: bool = True
    identity: Optional[IdentityFn] = None

    def to_dict(self) -> Dict[str, Any]:
        # identity is code, not config
        return {
            "searchable": self.searchable,
            "selectable": self.selectable,
            "pagination": self.pagination,
            "page_size": self.page_size,
            "sort_cycle": self.sort_cycle,
            "retain_hidden_selection": self.retain_hidden_selection,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], identity: Optional[IdentityFn] = None) -> ViewConfig:
        return cls(
            searchable=bool(data.get("searchable", True)),
            selectable=bool(data.get("selectable", True)),
            pagination=bool(data.get("pagination", True)),
            page_size=data.get("page_size", DEFAULT_PAGE_SIZE),
            sort_cycle=str(data.get("sort_cycle", "three_state")),
            retain_hidden_selection=bool(data.get("retain_hidden_selection", True)),
            identity=identity,
        )
