# src/dualprice/config/resolver.py
"""
Configuration Resolver - Settings Snapshot Assembly

Turns the flat host configuration (the structure a storefront page exposes
to its scripts) into an immutable SettingsSnapshot. Every field has a safe
default and every value goes through tolerant coercion, so resolution never
fails: malformed configuration simply produces a snapshot that makes the
engine do nothing.

Files that USE this module:
- dualprice.application.events (PriceEnhancer resolves a snapshot per scan)
- dualprice.app (resolves the snapshot for convert/email-vars commands)
- tests.test_resolver (unit tests)

Files that this module USES:
- dualprice.config.settings (Settings when no raw configuration is supplied)
- dualprice.domain.models (SettingsSnapshot and defaults)
- dualprice.shared.validators (type coercion)
"""
from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from dualprice.config.settings import Settings
from dualprice.domain.models import (
    DEFAULT_CODES,
    DEFAULT_LOCALE,
    DEFAULT_PRIMARY,
    DEFAULT_SYMBOLS,
    EXTRACTION_ORDERS,
    FORMAT_PAREN,
    FORMAT_STYLES,
    ORDER_ATTRIBUTES,
    TAG_STYLES,
    TAG_SYMBOL,
    SettingsSnapshot,
)
from dualprice.shared.validators import (
    coerce_bool,
    coerce_choice,
    coerce_code,
    coerce_positive_rate,
    coerce_str_map,
)

log = logging.getLogger(__name__)

# "enableProduct" -> "product", "enableHeaderCart" -> "header_cart"
_FLAG_KEY = re.compile(r"^enable([A-Z]\w*)$")
_NON_REGION_FLAGS = {"emails"}


def _flag_name(suffix: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", suffix).lower()


def _load_host_config() -> Mapping[str, Any]:
    """Load raw configuration from Settings, falling back to an empty mapping."""
    try:
        return Settings().to_host_config()
    except ValidationError as e:
        log.warning("Invalid storefront configuration, using defaults: %s", e)
        return {}


def _region_flags(raw: Mapping[str, Any]) -> dict[str, bool]:
    flags = {"product": False, "cart": False}
    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        match = _FLAG_KEY.match(key)
        if not match:
            continue
        name = _flag_name(match.group(1))
        if name in _NON_REGION_FLAGS:
            continue
        flags[name] = coerce_bool(value)
    return flags


def resolve(raw: Optional[Mapping[str, Any]] = None) -> SettingsSnapshot:
    """
    Assemble an immutable settings snapshot from host configuration.

    Args:
        raw: Flat host configuration (keys such as "primary", "rate",
             "showSecondary", "enableCart"). When None, configuration is
             loaded from the environment via Settings.

    Returns:
        SettingsSnapshot; never raises. A missing or non-positive rate
        yields rate 0.0, which disables conversion.
    """
    if raw is None:
        raw = _load_host_config()
    if not isinstance(raw, Mapping):
        log.warning("Ignoring non-mapping storefront configuration of type %s", type(raw).__name__)
        raw = {}

    snapshot = SettingsSnapshot(
        primary=coerce_code(raw.get("primary"), DEFAULT_PRIMARY),
        rate=coerce_positive_rate(raw.get("rate")),
        show_secondary=coerce_bool(raw.get("showSecondary")),
        tag_style=coerce_choice(raw.get("tagStyle"), TAG_STYLES, TAG_SYMBOL),
        format_style=coerce_choice(raw.get("format"), FORMAT_STYLES, FORMAT_PAREN),
        region_flags=MappingProxyType(_region_flags(raw)),
        symbols=MappingProxyType(coerce_str_map(raw.get("currencySymbols"), DEFAULT_SYMBOLS)),
        codes=MappingProxyType(coerce_str_map(raw.get("currencyCodes"), DEFAULT_CODES)),
        default_locale=_locale_tag(raw.get("locale")),
        extraction_order=coerce_choice(raw.get("extractionOrder"), EXTRACTION_ORDERS, ORDER_ATTRIBUTES),
        enable_emails=coerce_bool(raw.get("enableEmails")),
    )
    log.debug(
        "Resolved snapshot: primary=%s rate=%s active=%s flags=%s",
        snapshot.primary,
        snapshot.rate,
        snapshot.is_active,
        dict(snapshot.region_flags),
    )
    return snapshot


def _locale_tag(value: Any) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_LOCALE
