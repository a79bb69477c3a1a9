"""
Top-level package for the tabular data view engine.

This package exposes the engine (columns, pipeline stages, coordinator) and
the ambient configuration/logging helpers.
Most code should import from submodules such as:
    table_view.core
    table_view.config
    table_view.importing
"""

__all__: list[str] = []
