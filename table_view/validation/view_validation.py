from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from table_view.core.exceptions import ConfigurationError
from table_view.validation.errors import ValidationIssue

if TYPE_CHECKING:
    from table_view.config_model import ViewConfig
    from table_view.core.columns import Column

VALID_ALIGNMENTS = {"left", "center", "right"}
VALID_SORT_CYCLES = {"three_state", "two_state"}


def validate_columns(columns: Iterable[Column]) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    seen: set[str] = set()

    for position, column in enumerate(columns):
        key = getattr(column, "key", None)
        label = key if key else f"#{position}"

        if not key or not isinstance(key, str):
            issues.append(ValidationIssue("COLUMN_KEY", f"Column {label} has no string 'key'."))
        elif key in seen:
            issues.append(ValidationIssue("COLUMN_DUPLICATE_KEY", f"Column key '{key}' is declared more than once."))
        else:
            seen.add(key)

        if getattr(column, "header", None) is None:
            issues.append(ValidationIssue("COLUMN_HEADER", f"Column {label} has no 'header'."))

        for attr in ("render", "on_click"):
            fn = getattr(column, attr, None)
            if fn is not None and not callable(fn):
                issues.append(ValidationIssue("COLUMN_CALLABLE", f"Column {label} '{attr}' must be callable."))

        accessor = getattr(column, "accessor", None)
        if accessor is not None and not (isinstance(accessor, str) or callable(accessor)):
            issues.append(
                ValidationIssue("COLUMN_ACCESSOR", f"Column {label} 'accessor' must be a field name or callable.")
            )

        align = getattr(column, "align", "left")
        if align not in VALID_ALIGNMENTS:
            issues.append(ValidationIssue("COLUMN_ALIGN", f"Column {label} has invalid align '{align}'."))

    return issues


def validate_view_config(config: ViewConfig) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    page_size = config.page_size
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size <= 0:
        issues.append(ValidationIssue("CONFIG_PAGE_SIZE", f"page_size must be a positive integer, got {page_size!r}."))

    if config.sort_cycle not in VALID_SORT_CYCLES:
        issues.append(
            ValidationIssue(
                "CONFIG_SORT_CYCLE",
                f"sort_cycle '{config.sort_cycle}' is not one of {sorted(VALID_SORT_CYCLES)}.",
            )
        )

    if config.identity is not None and not callable(config.identity):
        issues.append(ValidationIssue("CONFIG_IDENTITY", "identity must be callable."))

    return issues


def ensure_valid(
        columns: Iterable[Column],
        config: Optional[ViewConfig] = None,
) -> None:
    """
    Raise a single ConfigurationError listing every column/config problem.
    """
    issues: List[ValidationIssue] = validate_columns(columns)
    if config is not None:
        issues.extend(validate_view_config(config))

    if issues:
        raise ConfigurationError(issues)
