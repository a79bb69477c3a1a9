from __future__ import annotations

import logging

from table_view.core.identity import build_rows, default_identity


def test_default_identity_prefers_id_field():
    assert default_identity({"id": "u-7"}, 3) == "u-7"
    assert default_identity({"name": "x"}, 3) == 3


def test_build_rows_keeps_positions():
    rows = build_rows([{"id": 10}, {"id": 20}])

    assert [(r.identity, r.position) for r in rows] == [(10, 0), (20, 1)]


def test_positional_fallback_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="table_view.core.identity"):
        rows = build_rows([{"id": 1}, {"name": "no id"}])

    assert [r.identity for r in rows] == [1, 1]
    assert "positional identity" in caplog.text


def test_injected_identity_skips_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="table_view.core.identity"):
        rows = build_rows([{"sku": "a"}, {"sku": "b"}], identity=lambda r: r["sku"])

    assert [r.identity for r in rows] == ["a", "b"]
    assert caplog.text == ""
