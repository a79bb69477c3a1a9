from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Callable, List, Optional, Sequence, TypeVar

import numpy as np
import pandas as pd

from table_view.core.columns import get_field, record_fields

logger = logging.getLogger(__name__)

T = TypeVar("T")
ValueGetter = Callable[[Any, str], Any]


def is_missing(value: Any) -> bool:
    """None, NaN and NaT are all treated as 'no value'."""
    if value is None:
        return True
    result = pd.isna(value)
    # array-likes give an element-wise answer, which is not "missing"
    return isinstance(result, (bool, np.bool_)) and bool(result)


def to_text(value: Any) -> Optional[str]:
    """
    Natural string form of a cell value, or None for missing values.

    numpy scalars are unwrapped so np.int64(3) reads as "3", and dates use
    their ISO form.
    """
    if is_missing(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def filter_rows(
        rows: Sequence[T],
        query: str,
        searchable_keys: Optional[Sequence[str]] = None,
        get_value: Optional[ValueGetter] = None,
) -> List[T]:
    """
    Return the rows where any searchable value contains the query,
    case-insensitively. Relative order is always preserved.

    :param rows: records (or wrapped rows, with a matching get_value)
    :param query: search text; blank means match-all
    :param searchable_keys: keys to search; None searches every field of each record
    :param get_value: (row, key) -> value, defaults to mapping/attribute lookup
    """
    query = query or ""
    if not query.strip():
        return list(rows)

    # whitespace inside a non-blank query is part of what must match
    needle = query.lower()

    getter = get_value or get_field

    def matches(row: T) -> bool:
        keys = searchable_keys if searchable_keys is not None else record_fields(row)
        for key in keys:
            text = to_text(getter(row, key))
            if text is not None and needle in text.lower():
                return True
        return False

    result = [row for row in rows if matches(row)]
    logger.debug("Filter %r matched %d of %d rows", needle, len(result), len(rows))
    return result
