from __future__ import annotations

import json
import logging

from table_view.config import load_view_config
from table_view.config_model import DEFAULT_PAGE_SIZE, ViewConfig


def test_view_config_defaults():
    cfg = ViewConfig()

    assert cfg.searchable and cfg.selectable and cfg.pagination
    assert cfg.page_size == DEFAULT_PAGE_SIZE == 10
    assert cfg.sort_cycle == "three_state"
    assert cfg.retain_hidden_selection is True
    assert cfg.identity is None


def test_view_config_to_from_dict_roundtrip():
    cfg = ViewConfig(searchable=False, page_size=25, sort_cycle="two_state", retain_hidden_selection=False)

    rebuilt = ViewConfig.from_dict(cfg.to_dict())

    assert rebuilt == cfg
    assert "identity" not in cfg.to_dict()


def test_load_view_config_with_view_section(tmp_path):
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"view": {"pagination": False, "page_size": 50}}))

    cfg = load_view_config(path)

    assert cfg.pagination is False
    assert cfg.page_size == 50
    assert cfg.searchable is True


def test_load_view_config_flat_and_unknown_keys(tmp_path, caplog):
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"selectable": False, "theme": "dark"}))

    with caplog.at_level(logging.WARNING, logger="table_view.config"):
        cfg = load_view_config(str(path), identity=lambda r: r["sku"])

    assert cfg.selectable is False
    assert cfg.identity({"sku": "A1"}) == "A1"
    assert "theme" in caplog.text
