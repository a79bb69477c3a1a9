# table_view/importing/dataframe.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from table_view.core.columns import Column

logger = logging.getLogger(__name__)


def records_from_dataframe(df: pd.DataFrame, index_as: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Convert a DataFrame into the list-of-dicts records the engine works on.

    - NaN / NaT / pd.NA become None, so they never match a search
    - numpy scalars are unwrapped to plain Python values
    - index_as: if given, the index is copied into each record under that name
      (e.g. index_as="id" gives every row an explicit identity)
    """
    frame = df
    if index_as is not None:
        if index_as in df.columns:
            logger.warning("Column %r already exists; index not copied", index_as)
        else:
            frame = df.reset_index(names=index_as)

    # object dtype first, otherwise None is coerced back to NaN in numeric columns
    frame = frame.astype(object).where(pd.notna(frame), None)

    records = []
    for raw in frame.to_dict(orient="records"):
        records.append({str(k): _plain(v) for k, v in raw.items()})

    logger.debug("Converted DataFrame with shape %s into %d records", df.shape, len(records))
    return records


def _plain(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def columns_from_dataframe(df: pd.DataFrame, non_sortable: Optional[List[str]] = None) -> List[Column]:
    """
    One Column per DataFrame column, headed by the column name.
    Numeric columns are right-aligned.
    """
    non_sortable = set(non_sortable or [])
    columns: List[Column] = []

    for name in df.columns:
        key = str(name)
        columns.append(
            Column(
                key=key,
                header=key,
                sortable=key not in non_sortable,
                align="right" if _is_numeric(df[name]) else "left",
            )
        )

    return columns


def _is_numeric(series: pd.Series) -> bool:
    return pd.api.types.is_numeric_dtype(series) and not pd.api.types.is_bool_dtype(series)
