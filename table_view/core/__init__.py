"""
Core engine layer: column registry, the filter/sort/paginate stages,
the selection tracker and the view coordinator
"""

from .columns import Column, ColumnRegistry
from .exceptions import ConfigurationError, TableViewError
from .state import SelectionIndicator, SortDirection, SortState, ViewSlot, ViewSnapshot
from .view import TableView

__all__ = [
    "Column",
    "ColumnRegistry",
    "ConfigurationError",
    "TableViewError",
    "SelectionIndicator",
    "SortDirection",
    "SortState",
    "ViewSlot",
    "ViewSnapshot",
    "TableView",
]
