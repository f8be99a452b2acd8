"""
Parsing Adapters - Price Extraction

This package reads numeric amounts out of host-rendered price markup.
"""

from dualprice.adapters.parsing.price_parser import (
    PRICE_ATTRIBUTES,
    extract_amount,
    parse_price,
    parse_total,
)

__all__ = [
    "PRICE_ATTRIBUTES",
    "extract_amount",
    "parse_price",
    "parse_total",
]
