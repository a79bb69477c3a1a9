from __future__ import annotations

import numpy as np
import pandas as pd

from table_view.core.columns import Column
from table_view.core.view import TableView
from table_view.importing import columns_from_dataframe, records_from_dataframe


def _make_frame():
    return pd.DataFrame(
        {
            "name": ["Alice", "Bob", None],
            "score": [3.5, np.nan, 1.0],
            "active": [True, False, True],
        },
        index=pd.Index(["u1", "u2", "u3"]),
    )


def test_records_from_dataframe_converts_missing_to_none():
    records = records_from_dataframe(_make_frame())

    assert records[0] == {"name": "Alice", "score": 3.5, "active": True}
    assert records[1]["score"] is None
    assert records[2]["name"] is None
    assert type(records[0]["score"]) is float


def test_records_from_dataframe_index_as_identity():
    records = records_from_dataframe(_make_frame(), index_as="id")

    assert [r["id"] for r in records] == ["u1", "u2", "u3"]


def test_columns_from_dataframe():
    columns = columns_from_dataframe(_make_frame(), non_sortable=["active"])

    assert [c.key for c in columns] == ["name", "score", "active"]
    assert [c.align for c in columns] == ["left", "right", "left"]
    assert [c.sortable for c in columns] == [True, True, False]


def test_dataframe_records_drive_a_view():
    df = _make_frame()
    view = TableView(records_from_dataframe(df, index_as="id"), columns_from_dataframe(df))

    view.toggle_sort("score")
    assert [r.identity for r in view.page_rows] == ["u1", "u3", "u2"]

    view.search("bo")
    assert [r.identity for r in view.page_rows] == ["u2"]

    view.search("nan")
    assert view.page_rows == []


def test_extra_columns_can_be_mixed_in():
    df = _make_frame()
    columns = columns_from_dataframe(df) + [
        Column(key="badge", header="Badge", accessor=lambda r: "on" if r["active"] else "off")
    ]
    view = TableView(records_from_dataframe(df, index_as="id"), columns)

    view.search("off")

    assert [r.identity for r in view.page_rows] == ["u2"]
