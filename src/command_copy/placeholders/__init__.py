from .materializer import (
    DEFAULT_STRATEGY,
    Strategy,
    assign,
    materialize,
    resolve_strategy,
    substitute,
)
from .scanner import PLACEHOLDER_PATTERN, is_user_variable, scan_placeholders

__all__ = [
    "DEFAULT_STRATEGY",
    "PLACEHOLDER_PATTERN",
    "Strategy",
    "assign",
    "is_user_variable",
    "materialize",
    "resolve_strategy",
    "scan_placeholders",
    "substitute",
]
