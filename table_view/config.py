from __future__ import annotations

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Optional

from .config_model import IdentityFn, ViewConfig

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {f.name for f in fields(ViewConfig)} - {"identity"}


def load_view_config(config_path: str | Path, identity: Optional[IdentityFn] = None) -> ViewConfig:
    """
    Load a ViewConfig from a JSON file.

    Accepts either a flat object ({"page_size": 25, ...}) or one with a
    "view" section ({"view": {"page_size": 25}}). Unknown keys are ignored.
    """
    config_path = Path(config_path)
    raw = json.loads(config_path.read_text())

    section = raw.get("view", raw) if isinstance(raw, dict) else {}

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown view config keys %s in %s", unknown, config_path)

    return ViewConfig.from_dict(section, identity=identity)
