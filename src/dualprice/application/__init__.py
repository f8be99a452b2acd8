"""
Application Layer - Use Cases and Services

This package contains the enhancement engine, its region table, event
wiring, and the server-side renderings (email totals, price blocks).
"""

from dualprice.application.enhancer import enhance_region, ensure_secondary_label, run_full_scan
from dualprice.application.events import DOCUMENT_READY, UPDATE_EVENTS, EventBus, PriceEnhancer
from dualprice.application.email_vars import alter_template_vars
from dualprice.application.price_block import render_confirmation_marker, render_price_block
from dualprice.application.regions import REGIONS

__all__ = [
    "enhance_region",
    "ensure_secondary_label",
    "run_full_scan",
    "DOCUMENT_READY",
    "UPDATE_EVENTS",
    "EventBus",
    "PriceEnhancer",
    "alter_template_vars",
    "render_confirmation_marker",
    "render_price_block",
    "REGIONS",
]
