from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Union

from table_view.validation.view_validation import ensure_valid

if TYPE_CHECKING:
    from table_view.config_model import ViewConfig

Accessor = Union[str, Callable[[Any], Any]]


def get_field(record: Any, name: str) -> Any:
    """
    Read a named field from a record: mapping key first, then attribute.
    Missing fields read as None.
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def record_fields(record: Any) -> List[str]:
    """Field names of a record, used when no searchable columns are configured."""
    if isinstance(record, Mapping):
        return [str(k) for k in record.keys()]
    if hasattr(record, "__dict__"):
        return [k for k in vars(record) if not k.startswith("_")]
    return []


@dataclass(frozen=True)
class Column:
    """
    Static description of one table column.

    - key: unique column key, also the default field read from each record
    - header: whatever the rendering layer shows in the header cell
    - sortable: clicking the header cycles the sort (default True)
    - searchable: values in this column take part in search (default True)
    - render: optional row -> cell projector, used instead of the raw value
    - on_click: optional row -> None handler for cell activation
    - accessor: optional field name or record -> value function overriding 'key'
    """

    key: str
    header: Any
    sortable: bool = True
    searchable: bool = True
    render: Optional[Callable[[Any], Any]] = None
    on_click: Optional[Callable[[Any], None]] = None
    width: Optional[str] = None
    accessor: Optional[Accessor] = None
    align: str = "left"

    def value(self, record: Any) -> Any:
        if self.accessor is None:
            return get_field(record, self.key)
        if isinstance(self.accessor, str):
            return get_field(record, self.accessor)
        return self.accessor(record)

    def cell(self, record: Any) -> Any:
        if self.render is not None:
            return self.render(record)
        return self.value(record)


class ColumnRegistry:
    """
    Ordered, validated set of columns for one view.

    Design Notes:
    - Validated once at construction, together with the view config if given;
      duplicate keys or malformed descriptors raise ConfigurationError listing every issue
    - Keeps declaration order, which is the display order
    """

    def __init__(self, columns: Iterable[Column], config: Optional[ViewConfig] = None):
        columns = list(columns)
        ensure_valid(columns, config)
        self._columns: Dict[str, Column] = {c.key: c for c in columns}

    def __iter__(self):
        return iter(self._columns.values())

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._columns

    def get(self, key: str) -> Optional[Column]:
        return self._columns.get(key)

    @property
    def keys(self) -> List[str]:
        return list(self._columns)

    def searchable_keys(self) -> List[str]:
        return [c.key for c in self._columns.values() if c.searchable]

    def is_sortable(self, key: str) -> bool:
        column = self._columns.get(key)
        return column is not None and column.sortable

    def value_getter(self) -> Callable[[Any, str], Any]:
        """
        Return a (record, key) -> value function honouring column accessors,
        falling back to plain field lookup for keys with no column.
        """

        def getter(record: Any, key: str) -> Any:
            column = self._columns.get(key)
            if column is None:
                return get_field(record, key)
            return column.value(record)

        return getter
