"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Configuration coercion
- Locale resolution
- Logging configuration
"""

from dualprice.shared.validators import (
    coerce_bool,
    coerce_choice,
    coerce_code,
    coerce_float,
    coerce_positive_rate,
    coerce_str_map,
    validate_iso_code,
)
from dualprice.shared.language import (
    document_language,
    resolve_locale,
    LANG_ENGLISH,
)

__all__ = [
    "coerce_bool",
    "coerce_choice",
    "coerce_code",
    "coerce_float",
    "coerce_positive_rate",
    "coerce_str_map",
    "validate_iso_code",
    "document_language",
    "resolve_locale",
    "LANG_ENGLISH",
]
