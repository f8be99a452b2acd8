# src/dualprice/adapters/dom/document.py
"""
Document Adapter - HTML Tree Access and Label Insertion

Wraps the BeautifulSoup operations the enhancement engine needs: parsing and
rendering pages, selector queries, the label presence guard, and the single
append-only mutation the engine performs.

Files that USE this module:
- dualprice.application.enhancer (select_unique, has_secondary_label, append_label)
- dualprice.application.events (load_document via PriceEnhancer.from_html)
- dualprice.app (render_document and LABEL_SELECTOR for the enhance command)

Files that this module USES:
- dualprice.domain.models (LABEL_CLASS, SecondaryLabel)
- bs4 (HTML parsing and CSS selectors)
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from bs4 import BeautifulSoup, Tag

from dualprice.domain.models import LABEL_CLASS, SecondaryLabel

log = logging.getLogger(__name__)

Root = Union[BeautifulSoup, Tag]

LABEL_SELECTOR = f".{LABEL_CLASS}"


def load_document(html: str) -> BeautifulSoup:
    """Parse an HTML page into a mutable tree."""
    return BeautifulSoup(html, "html.parser")


def render_document(document: BeautifulSoup) -> str:
    """Serialise a (possibly enhanced) tree back to HTML."""
    return str(document)


def is_label(tag: object) -> bool:
    """Return True if ``tag`` carries the secondary label marker."""
    if not isinstance(tag, Tag):
        return False
    return LABEL_CLASS in (tag.get("class") or [])


def has_secondary_label(tag: Tag) -> bool:
    """
    Check whether a price element has already been enhanced.

    True when the element contains a label, when its next element sibling is
    a label, when any element inside its parent is a label, or when an
    enclosing element already received a label as a direct child. The parent
    and ancestor checks catch different selectors reaching the same logical
    price through different paths (an outer ".product-price" and the inner
    ".price" span, for example).

    Args:
        tag: Price element

    Returns:
        True if a label is present and insertion must be skipped
    """
    if tag.select_one(LABEL_SELECTOR) is not None:
        return True
    if is_label(_next_element_sibling(tag)):
        return True
    parent = tag.parent
    if isinstance(parent, Tag) and parent.select_one(LABEL_SELECTOR) is not None:
        return True
    for ancestor in tag.parents:
        if any(is_label(child) for child in ancestor.children):
            return True
    return False


def append_label(tag: Tag, label: SecondaryLabel) -> Tag:
    """
    Append a label span as the last child of ``tag``.

    Args:
        tag: Price element
        label: Label text and marker classes

    Returns:
        The inserted span
    """
    soup = _owner(tag)
    span = soup.new_tag("span")
    span["class"] = list(label.classes)
    span.string = label.text
    tag.append(span)
    return span


def select_unique(roots: Iterable[Root], selectors: Iterable[str]) -> List[Tag]:
    """
    Resolve the union of ``selectors`` below every root.

    Selectors are evaluated in priority order, each in document order, and
    each element appears once even if several selectors or overlapping
    roots match it.

    Args:
        roots: Container elements (or a whole document)
        selectors: CSS selectors relative to each root

    Returns:
        Matching elements without duplicates
    """
    roots = list(roots)
    seen: set[int] = set()
    result: List[Tag] = []
    for selector in selectors:
        if not selector or not selector.strip():
            continue
        for root in roots:
            for tag in root.select(selector):
                if id(tag) in seen:
                    continue
                seen.add(id(tag))
                result.append(tag)
    return result


def _next_element_sibling(tag: Tag) -> Optional[Tag]:
    for sibling in tag.next_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def _owner(tag: Tag) -> BeautifulSoup:
    node: Tag = tag
    while node.parent is not None:
        node = node.parent
    if isinstance(node, BeautifulSoup):
        return node
    # Detached subtree: any BeautifulSoup can build tags
    log.debug("Creating label for a detached element <%s>", tag.name)
    return BeautifulSoup("", "html.parser")
