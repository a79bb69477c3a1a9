from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

ENGINE_LOGGER = "table_view"
LOG_FORMAT_ENV = "TABLE_VIEW_LOG_FORMAT"
RECORD_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_format_mode(force_format: Optional[str] = None) -> str:
    """
    Selection Order:
        1) force_format argument ("json" or "plain") if provided
        2) env var TABLE_VIEW_LOG_FORMAT
        3) default = "json"
    """
    if force_format is not None:
        return force_format.lower()
    return os.getenv(LOG_FORMAT_ENV, "json").lower()


def build_formatter(format_mode: str) -> logging.Formatter:
    if format_mode == "plain":
        return logging.Formatter(RECORD_FORMAT)
    return jsonlogger.JsonFormatter(RECORD_FORMAT)


def configure_logging(
        level: int = logging.INFO,
        force_format: Optional[str] = None,
        logger_name: Optional[str] = ENGINE_LOGGER,
) -> logging.Logger:
    """
    Attach one stream handler to the engine's logger (or another named logger;
    None means the root logger) and return it.

    Modes:
    - JSON (default) for the host application's log pipeline
    - plain text when debugging a view interactively

    Records handled here stop at this logger, so a host that also logs the
    root logger does not see engine records twice.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(resolve_format_mode(force_format)))

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = logger_name is None

    return logger
