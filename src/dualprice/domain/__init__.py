"""
Domain Layer - Pure Business Objects

This package contains domain models and business constants.
No dependencies on infrastructure or external systems.
"""

from dualprice.domain.conversion import compute_secondary, convert, secondary_currency
from dualprice.domain.models import (
    LABEL_CLASS,
    PIPE_LABEL_CLASS,
    CurrencyPair,
    Region,
    SecondaryAmount,
    SecondaryLabel,
    SettingsSnapshot,
)

__all__ = [
    "compute_secondary",
    "convert",
    "secondary_currency",
    "LABEL_CLASS",
    "PIPE_LABEL_CLASS",
    "CurrencyPair",
    "Region",
    "SecondaryAmount",
    "SecondaryLabel",
    "SettingsSnapshot",
]
