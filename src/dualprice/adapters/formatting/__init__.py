"""
Formatting Adapters - Label Formatting

This package contains number, currency and label formatting for secondary
prices.
"""

from dualprice.adapters.formatting.formatter import (
    build_label,
    format_amount,
    format_number,
    format_secondary,
    make_label,
)

__all__ = [
    "build_label",
    "format_amount",
    "format_number",
    "format_secondary",
    "make_label",
]
