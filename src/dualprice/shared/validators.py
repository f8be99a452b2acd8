# src/dualprice/shared/validators.py
"""
Input Coercion Utilities - Tolerant Configuration Parsing

This module provides the type coercion used when turning raw host
configuration into a settings snapshot. Every function accepts arbitrary
input and returns a default instead of raising, so malformed configuration
degrades to "feature disabled" rather than an error.

Files that USE this module:
- dualprice.config.resolver (coerces every raw configuration field)
- dualprice.config.settings (validates the primary currency code)

Files that this module USES:
- None (pure utility functions)
"""
import math
import re
from typing import Any, Iterable, Mapping, Optional

_TRUE_STRINGS = {"1", "true", "yes", "on", "y"}
_FALSE_STRINGS = {"0", "false", "no", "off", "n", ""}

_ISO_CODE = re.compile(r"^[A-Z]{3}$")


def coerce_bool(value: Any, default: bool = False) -> bool:
    """
    Coerce host flag values (1/0, "true"/"false", "on"/"off") to bool.

    Args:
        value: Raw value
        default: Returned for None or unrecognised strings

    Returns:
        Boolean value
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return default


def coerce_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a number or numeric string to float.

    Accepts a comma decimal separator ("1,95583"). NaN and infinities are
    rejected.

    Args:
        value: Raw value
        default: Returned when the value cannot be converted

    Returns:
        Finite float value
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def coerce_positive_rate(value: Any) -> float:
    """Coerce a conversion rate; anything non-positive becomes 0.0 (disabled)."""
    rate = coerce_float(value, 0.0)
    return rate if rate > 0 else 0.0


def coerce_choice(value: Any, choices: Iterable[str], default: str) -> str:
    """Return ``value`` lower-cased if it is one of ``choices``, else ``default``."""
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in choices:
            return lowered
    return default


def coerce_code(value: Any, default: str) -> str:
    """Normalise a currency code to upper case; blank or non-string gives ``default``."""
    if isinstance(value, str) and value.strip():
        return value.strip().upper()
    return default


def coerce_str_map(value: Any, default: Mapping[str, str]) -> dict[str, str]:
    """
    Coerce a code -> string table.

    Non-mapping input yields a copy of ``default``. Entries with blank keys
    or values are dropped; keys are upper-cased.

    Args:
        value: Raw mapping
        default: Fallback table

    Returns:
        New dictionary
    """
    if not isinstance(value, Mapping):
        return dict(default)
    result: dict[str, str] = {}
    for key, item in value.items():
        if key is None or item is None:
            continue
        code = str(key).strip().upper()
        text = str(item).strip()
        if code and text:
            result[code] = text
    return result or dict(default)


def validate_iso_code(code: Optional[str]) -> bool:
    """
    Validate ISO 4217 currency code format.

    Args:
        code: Currency code to validate

    Returns:
        True if the code is exactly three upper-case letters
    """
    if not code:
        return False
    return bool(_ISO_CODE.match(code))
