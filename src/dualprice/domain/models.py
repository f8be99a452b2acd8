# src/dualprice/domain/models.py
"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Settings snapshots (immutable, rebuilt for every scan)
- Currency pairs and conversion direction
- Page regions scanned for prices
- Secondary labels appended next to prices

Files that USE this module:
- dualprice.config.resolver (builds SettingsSnapshot)
- dualprice.application.* (all services consume the snapshot and regions)
- dualprice.adapters.* (formatting and DOM adapters build and append labels)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass, field  # Decorators for creating data classes
from types import MappingProxyType  # Read-only views over dictionaries
from typing import Mapping, Optional  # Type hints for mappings and optional values

# Label markers: the only contract other code may rely on
LABEL_CLASS = "dualprice-secondary"
PIPE_LABEL_CLASS = "dualprice-secondary--pipe"

TAG_SYMBOL = "symbol"
TAG_CODE = "code"
TAG_STYLES = (TAG_SYMBOL, TAG_CODE)

FORMAT_PAREN = "paren"
FORMAT_PIPE = "pipe"
FORMAT_STYLES = (FORMAT_PAREN, FORMAT_PIPE)

ORDER_ATTRIBUTES = "attributes"
ORDER_TEXT = "text"
EXTRACTION_ORDERS = (ORDER_ATTRIBUTES, ORDER_TEXT)

DEFAULT_PRIMARY = "BGN"
DEFAULT_LOCALE = "en"
DEFAULT_SYMBOLS = {"BGN": "лв", "EUR": "€"}
DEFAULT_CODES = {"BGN": "BGN", "EUR": "EUR"}
DEFAULT_PREFIX_SYMBOLS = frozenset({"EUR"})


@dataclass(frozen=True)
class CurrencyPair:
    """
    Two currencies linked by a fixed rate.

    The rate is expressed as units of ``divide`` per one unit of ``multiply``
    (1 EUR = 1.95583 BGN), so amounts in ``divide`` are divided by the rate
    and amounts in any other currency are multiplied by it.

    Attributes:
        divide: Currency whose amounts are divided by the rate
        multiply: Currency whose amounts are multiplied by the rate
    """
    divide: str = "BGN"
    multiply: str = "EUR"

    def complement(self, code: str) -> str:
        """Return the other side of the pair for ``code``."""
        if code == self.divide:
            return self.multiply
        return self.divide


@dataclass(frozen=True)
class SettingsSnapshot:
    """
    Immutable configuration for one scan pass.

    Attributes:
        primary: Currency the host renders prices in
        rate: Fixed conversion rate (<= 0 disables conversion)
        show_secondary: Master switch for the whole engine
        tag_style: "symbol" or "code"
        format_style: "paren" or "pipe"
        region_flags: Flag name -> enabled (e.g. {"product": True, "cart": False})
        symbols: Currency code -> display symbol
        codes: Currency code -> ISO code string
        pair: Currency pair driving conversion direction
        prefix_symbols: Currencies whose symbol precedes the number
        default_locale: Locale used when the document declares none
        extraction_order: "attributes" (attribute-first) or "text" (text-first)
        enable_emails: Whether email template totals get secondary values
    """
    primary: str = DEFAULT_PRIMARY
    rate: float = 0.0
    show_secondary: bool = False
    tag_style: str = TAG_SYMBOL
    format_style: str = FORMAT_PAREN
    region_flags: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))
    symbols: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_SYMBOLS)))
    codes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_CODES)))
    pair: CurrencyPair = field(default_factory=CurrencyPair)
    prefix_symbols: frozenset = DEFAULT_PREFIX_SYMBOLS
    default_locale: str = DEFAULT_LOCALE
    extraction_order: str = ORDER_ATTRIBUTES
    enable_emails: bool = False

    @property
    def is_active(self) -> bool:
        """True when the engine should produce labels at all."""
        return self.show_secondary and self.rate > 0

    def is_region_enabled(self, flag: str) -> bool:
        """Return the enable flag for a region (missing flags are disabled)."""
        return bool(self.region_flags.get(flag, False))


@dataclass(frozen=True)
class Region:
    """
    A named page area scanned for prices.

    Attributes:
        name: Region identifier used in logs
        container: CSS selector locating the region container(s)
        candidates: CSS selectors, relative to the container, matching prices
        flag: Region enable flag required in the snapshot
    """
    name: str
    container: str
    candidates: tuple[str, ...]
    flag: str


@dataclass(frozen=True)
class SecondaryAmount:
    """A converted amount together with its currency code."""
    amount: float
    currency: str


@dataclass(frozen=True)
class SecondaryLabel:
    """
    Text appended next to a primary price.

    Attributes:
        text: Label text, e.g. "(€10.00)" or "| €10.00"
        classes: Marker classes carried by the label element
        amount: Converted amount, when known
        currency: Secondary currency code, when known
    """
    text: str
    classes: tuple[str, ...] = (LABEL_CLASS,)
    amount: Optional[float] = None
    currency: Optional[str] = None
