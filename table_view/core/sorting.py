from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from table_view.core.columns import get_field
from table_view.core.filtering import is_missing
from table_view.core.state import SortDirection, SortState

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Direction that follows each direction on a header click of the active column
SORT_CYCLES: Dict[str, Dict[SortDirection, SortDirection]] = {
    "three_state": {
        SortDirection.NONE: SortDirection.DESC,
        SortDirection.DESC: SortDirection.ASC,
        SortDirection.ASC: SortDirection.NONE,
    },
    "two_state": {
        SortDirection.NONE: SortDirection.DESC,
        SortDirection.DESC: SortDirection.ASC,
        SortDirection.ASC: SortDirection.DESC,
    },
}


def next_sort_state(current: SortState, key: str, cycle: str = "three_state") -> SortState:
    """
    Sort state after clicking the header of 'key'.

    Clicking a column other than the active one resets the old column and
    starts the new one at the first step of the cycle (DESC).
    """
    transitions = SORT_CYCLES[cycle]

    if key != current.key:
        return SortState(key=key, direction=transitions[SortDirection.NONE])

    direction = transitions[current.direction]
    if direction is SortDirection.NONE:
        return SortState()
    return SortState(key=key, direction=direction)


def compare_values(a: Any, b: Any) -> int:
    """
    Natural ordering with graceful fallback.

    Missing values (None/NaN/NaT) compare greater than everything else.
    Values that cannot be compared directly are compared by their string
    form; if even that fails they are treated as equal.
    """
    a_missing, b_missing = is_missing(a), is_missing(b)
    if a_missing or b_missing:
        return int(a_missing) - int(b_missing)

    try:
        return int(a > b) - int(a < b)
    except (TypeError, ValueError):
        pass

    try:
        sa, sb = str(a), str(b)
    except Exception:
        logger.debug("Unorderable values %r / %r treated as equal", type(a), type(b))
        return 0

    logger.debug("Comparing %s and %s by string form", type(a).__name__, type(b).__name__)
    return (sa > sb) - (sa < sb)


def sort_rows(
        rows: Sequence[T],
        key: Optional[str],
        direction: SortDirection,
        get_value: Optional[Callable[[Any, str], Any]] = None,
) -> List[T]:
    """
    Stable sort of rows by one column.

    DESC is the exact inverse of ASC for distinct values; equal values keep
    their input order in both directions, and missing values always go last.
    With no key or direction NONE the input order is returned unchanged.
    """
    if key is None or direction is SortDirection.NONE:
        return list(rows)

    getter = get_value or get_field
    sign = -1 if direction is SortDirection.DESC else 1

    # Pair each row with its value up front so accessors run once per row
    decorated = [(getter(row, key), row) for row in rows]

    def cmp(left, right) -> int:
        a, b = left[0], right[0]
        a_missing, b_missing = is_missing(a), is_missing(b)
        if a_missing or b_missing:
            return int(a_missing) - int(b_missing)
        return sign * compare_values(a, b)

    # list.sort is stable, and a negated comparator keeps ties in input order
    decorated.sort(key=cmp_to_key(cmp))
    return [row for _, row in decorated]
