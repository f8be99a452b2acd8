"""
DualPrice - Secondary Currency Price Labels

Augments storefront HTML rendered in a primary currency with a secondary
currency equivalent computed from a fixed exchange rate (e.g. BGN/EUR),
injecting one idempotent label next to each price across product, cart,
checkout and order confirmation regions.
"""

__version__ = "1.0.0"
__author__ = "Masih Sadri"
