# src/dualprice/adapters/formatting/formatter.py
"""
Label Formatter - Secondary Amount Presentation

This module turns converted amounts into display strings: locale-aware
two-decimal numbers, currency symbol or ISO code placement, and the
parenthesised or pipe-separated label wrapping.

Files that USE this module:
- dualprice.application.enhancer (make_label per price element)
- dualprice.application.email_vars (format_secondary for template totals)
- dualprice.application.price_block (format_secondary for server-side snippets)
- tests.test_formatter (unit tests)

Files that this module USES:
- dualprice.domain.conversion (compute_secondary)
- dualprice.domain.models (SettingsSnapshot, SecondaryLabel, style constants)
- dualprice.shared.language (resolve_locale)
- babel (CLDR number formatting)
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from babel import Locale
from babel.numbers import format_decimal

from dualprice.domain.conversion import compute_secondary
from dualprice.domain.models import (
    FORMAT_PIPE,
    LABEL_CLASS,
    PIPE_LABEL_CLASS,
    TAG_CODE,
    SecondaryLabel,
    SettingsSnapshot,
)
from dualprice.shared.language import resolve_locale

# Always exactly two fraction digits, grouped per locale
AMOUNT_PATTERN = "#,##0.00"
CENT = Decimal("0.01")


def format_number(amount: float, locale: Union[Locale, str, None] = None) -> str:
    """
    Format a number with two decimals and locale grouping.

    Halves round away from zero: 0.125 -> "0.13".

    Args:
        amount: Value to format
        locale: Babel Locale or language tag (default: English)

    Returns:
        Formatted number, e.g. "1,234.56" (en) or "1 234,56" (bg)
    """
    if not isinstance(locale, Locale):
        locale = resolve_locale(locale)
    rounded = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
    return format_decimal(rounded, format=AMOUNT_PATTERN, locale=locale)


def format_amount(
    amount: float,
    currency: str,
    snapshot: SettingsSnapshot,
    locale: Union[Locale, str, None] = None,
) -> str:
    """
    Format an amount with its currency tag.

    With the "code" tag style the ISO code follows the number. Otherwise the
    currency symbol precedes the number for currencies in
    ``snapshot.prefix_symbols`` and follows it for all others.

    Args:
        amount: Secondary amount
        currency: Currency code of ``amount``
        snapshot: Settings snapshot (tag style, symbol/code tables)
        locale: Babel Locale or language tag; defaults to the snapshot locale

    Returns:
        Formatted amount, e.g. "€10.00", "100.00 лв" or "10.00 EUR"
    """
    if locale is None:
        locale = snapshot.default_locale
    number = format_number(amount, locale)
    if snapshot.tag_style == TAG_CODE:
        return f"{number} {snapshot.codes.get(currency, currency)}"
    symbol = snapshot.symbols.get(currency, currency)
    if currency in snapshot.prefix_symbols:
        return f"{symbol}{number}"
    return f"{number} {symbol}"


def build_label(
    formatted: str,
    snapshot: SettingsSnapshot,
    amount: Optional[float] = None,
    currency: Optional[str] = None,
) -> SecondaryLabel:
    """
    Wrap a formatted amount per the configured format style.

    Args:
        formatted: Output of format_amount
        snapshot: Settings snapshot (format style)
        amount: Converted amount, carried for callers
        currency: Secondary currency code, carried for callers

    Returns:
        SecondaryLabel with "| x" and the pipe marker, or "(x)"
    """
    if snapshot.format_style == FORMAT_PIPE:
        return SecondaryLabel(
            text=f"| {formatted}",
            classes=(LABEL_CLASS, PIPE_LABEL_CLASS),
            amount=amount,
            currency=currency,
        )
    return SecondaryLabel(text=f"({formatted})", amount=amount, currency=currency)


def format_secondary(
    amount: Optional[float],
    snapshot: SettingsSnapshot,
    locale: Union[Locale, str, None] = None,
) -> Optional[str]:
    """
    Convert a primary amount and format the result in one step.

    Returns:
        Formatted secondary amount, or None when conversion is unavailable
    """
    secondary = compute_secondary(amount, snapshot)
    if secondary is None:
        return None
    return format_amount(secondary.amount, secondary.currency, snapshot, locale)


def make_label(
    amount: Optional[float],
    snapshot: SettingsSnapshot,
    locale: Union[Locale, str, None] = None,
) -> Optional[SecondaryLabel]:
    """Convert, format and wrap a primary amount; None when nothing to show."""
    secondary = compute_secondary(amount, snapshot)
    if secondary is None:
        return None
    formatted = format_amount(secondary.amount, secondary.currency, snapshot, locale)
    return build_label(formatted, snapshot, secondary.amount, secondary.currency)
