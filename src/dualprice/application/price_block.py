# src/dualprice/application/price_block.py
"""
Server-side Price Blocks - Snippets for Storefront Templates

Renders the secondary price snippet a storefront appends after a product
price while building the page, and the marker element placed on order
confirmation pages.

Files that USE this module:
- tests.test_price_block (unit tests)

Files that this module USES:
- dualprice.adapters.formatting.formatter (make_label)
- dualprice.application.regions (FLAG_PRODUCT, FLAG_CART)
"""
from __future__ import annotations

from html import escape
from typing import Any, Mapping, Optional

from dualprice.adapters.formatting.formatter import make_label
from dualprice.application.regions import FLAG_CART, FLAG_PRODUCT
from dualprice.domain.models import SettingsSnapshot
from dualprice.shared.validators import coerce_float

PRICE_BLOCK_TYPES = ("price", "unit_price", "old_price")
# Checked in order; the first present key supplies the amount
PRODUCT_AMOUNT_KEYS = ("price_amount", "price", "price_tax_exc")

CONFIRMATION_MARKER = '<div class="dualprice-confirmation-data" aria-hidden="true"></div>'


def _product_amount(product: Mapping[str, Any]) -> Optional[float]:
    for key in PRODUCT_AMOUNT_KEYS:
        if key in product and product[key] is not None:
            return coerce_float(product[key], 0.0)
    return None


def render_price_block(product: Mapping[str, Any], block_type: str, snapshot: SettingsSnapshot) -> str:
    """
    Render the secondary price snippet for a product price block.

    Args:
        product: Product data with price_amount, price or price_tax_exc
        block_type: Price block type; only price, unit_price and old_price render
        snapshot: Settings snapshot

    Returns:
        ' <span class="...">(…)</span>' or an empty string
    """
    if not snapshot.is_active or not snapshot.is_region_enabled(FLAG_PRODUCT):
        return ""
    if block_type not in PRICE_BLOCK_TYPES or not isinstance(product, Mapping):
        return ""
    label = make_label(_product_amount(product), snapshot)
    if label is None:
        return ""
    classes = " ".join(label.classes)
    return f' <span class="{classes}">{escape(label.text, quote=False)}</span>'


def render_confirmation_marker(snapshot: SettingsSnapshot, has_order: bool) -> str:
    """Return the order confirmation marker element, or an empty string."""
    if not snapshot.is_active or not snapshot.is_region_enabled(FLAG_CART):
        return ""
    if not has_order:
        return ""
    return CONFIRMATION_MARKER
