from __future__ import annotations

import logging
from typing import Any, Hashable, List, Optional, Sequence

from table_view.config_model import IdentityFn
from table_view.core.columns import get_field
from table_view.core.state import Row

logger = logging.getLogger(__name__)

IDENTITY_FIELD = "id"


def default_identity(record: Any, position: int) -> Hashable:
    """
    The record's 'id' field if it has one, else its position in the dataset.
    Positional identities drift if the dataset is reordered between renders.
    """
    value = get_field(record, IDENTITY_FIELD)
    return position if value is None else value


def build_rows(records: Sequence[Any], identity: Optional[IdentityFn] = None) -> List[Row]:
    """
    Wrap records as Row objects carrying their identity and original position.

    Logs a warning (once per call) when any record falls back to a positional
    identity, since selections keyed on positions can point at different
    records after the caller reorders or replaces the data.
    """
    rows: List[Row] = []
    positional = 0

    for position, record in enumerate(records):
        if identity is not None:
            key = identity(record)
        else:
            key = default_identity(record, position)
            if get_field(record, IDENTITY_FIELD) is None:
                positional += 1
        rows.append(Row(identity=key, position=position, record=record))

    if positional:
        logger.warning(
            "%d of %d rows have no '%s' field; using positional identity, "
            "selection may drift if the data is reordered",
            positional,
            len(rows),
            IDENTITY_FIELD,
        )

    return rows
