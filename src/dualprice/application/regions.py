# src/dualprice/application/regions.py
"""
Region Table - Page Areas Scanned for Prices

Each region names a container selector, the price selectors evaluated
inside it, and the enable flag that gates it. Adding a region is a data
change here; the engine iterates the table uniformly.

Files that USE this module:
- dualprice.application.enhancer (default region table for full scans)
- dualprice.application.events (PriceEnhancer default regions)

Files that this module USES:
- dualprice.domain.models (Region)
"""
from dualprice.domain.models import Region

FLAG_PRODUCT = "product"
FLAG_CART = "cart"

PRODUCT_PRICES = Region(
    name="product_prices",
    container=".product-prices",
    candidates=(
        '.current-price span[itemprop="price"]',
        ".current-price span",
        ".price",
        ".product-price",
    ),
    flag=FLAG_PRODUCT,
)

PRODUCT_LISTING = Region(
    name="product_listing",
    container=".product-miniature",
    candidates=(".price", ".product-price"),
    flag=FLAG_PRODUCT,
)

CART_ITEMS = Region(
    name="cart_items",
    container=".cart-item",
    candidates=(".product-price", ".price"),
    flag=FLAG_CART,
)

CART_SUMMARY = Region(
    name="cart_summary",
    container=".cart-summary",
    candidates=(".cart-total .value", ".cart-total .price", ".cart-total .cart-value"),
    flag=FLAG_CART,
)

CART_MODAL = Region(
    name="cart_modal",
    container="#blockcart-modal",
    candidates=(".product-price", ".price", ".cart-content .value"),
    flag=FLAG_CART,
)

ORDER_CONFIRMATION = Region(
    name="order_confirmation",
    container=".order-confirmation",
    candidates=(".order-confirmation-table .value", ".total-value", ".value"),
    flag=FLAG_CART,
)

CHECKOUT_SUMMARY = Region(
    name="checkout_summary",
    container="#js-checkout-summary",
    candidates=(".cart-summary-line .value", ".cart-total .value", ".product-price"),
    flag=FLAG_CART,
)

HEADER_MINI_CART = Region(
    name="header_mini_cart",
    container=".blockcart",
    candidates=(".cart-total .value", ".value", ".price"),
    flag=FLAG_CART,
)

REGIONS: tuple[Region, ...] = (
    PRODUCT_PRICES,
    PRODUCT_LISTING,
    CART_ITEMS,
    CART_SUMMARY,
    CART_MODAL,
    ORDER_CONFIRMATION,
    CHECKOUT_SUMMARY,
    HEADER_MINI_CART,
)
