from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from table_view.validation.errors import ValidationIssue


class TableViewError(Exception):
    """Base exception for all table_view errors"""
    pass


class ConfigurationError(TableViewError):
    """
    Invalid column descriptors or view config, detected once at construction.

    Carries every problem found in a single validation pass, so callers can
    report all of them rather than fixing one at a time.
    """

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        super().__init__("\n".join(f"{i.code}: {i.message}" for i in self.issues))
