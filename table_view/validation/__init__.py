from .errors import ValidationIssue
from .view_validation import ensure_valid, validate_columns, validate_view_config

__all__ = ["ValidationIssue", "ensure_valid", "validate_columns", "validate_view_config"]
