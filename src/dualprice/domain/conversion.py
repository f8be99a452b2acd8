# src/dualprice/domain/conversion.py
"""
Conversion - Fixed-Rate Currency Conversion

Converts a primary-currency amount into the complementary currency of the
configured pair. Amounts in the pair's "divide" currency are divided by the
rate; amounts in any other currency are multiplied by it.

Files that USE this module:
- dualprice.adapters.formatting.formatter (format_secondary)
- dualprice.application.enhancer (compute_secondary per price element)
- tests.test_conversion (unit tests)

Files that this module USES:
- dualprice.domain.models (SettingsSnapshot, SecondaryAmount)
"""
from __future__ import annotations

from typing import Optional

from dualprice.domain.models import SecondaryAmount, SettingsSnapshot


def secondary_currency(snapshot: SettingsSnapshot) -> str:
    """Return the currency secondary labels are shown in."""
    return snapshot.pair.complement(snapshot.primary)


def convert(amount: Optional[float], snapshot: SettingsSnapshot) -> Optional[float]:
    """
    Convert a primary amount to the secondary currency.

    Args:
        amount: Primary-currency amount
        snapshot: Settings snapshot carrying rate and primary currency

    Returns:
        Converted amount, or None when rate <= 0 or amount <= 0
    """
    if amount is None or snapshot.rate <= 0 or amount <= 0:
        return None
    if snapshot.primary == snapshot.pair.divide:
        return amount / snapshot.rate
    return amount * snapshot.rate


def compute_secondary(amount: Optional[float], snapshot: SettingsSnapshot) -> Optional[SecondaryAmount]:
    """Convert ``amount`` and pair the result with the secondary currency code."""
    converted = convert(amount, snapshot)
    if not converted:
        return None
    return SecondaryAmount(amount=converted, currency=secondary_currency(snapshot))
