"""
DOM Adapters - HTML Documents

This package parses, queries and mutates storefront HTML, and fetches live
pages for previews.
"""

from dualprice.adapters.dom.document import (
    LABEL_SELECTOR,
    append_label,
    has_secondary_label,
    is_label,
    load_document,
    render_document,
    select_unique,
)
from dualprice.adapters.dom.fetcher import fetch_page

__all__ = [
    "LABEL_SELECTOR",
    "append_label",
    "has_secondary_label",
    "is_label",
    "load_document",
    "render_document",
    "select_unique",
    "fetch_page",
]
