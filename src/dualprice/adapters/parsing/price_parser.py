# src/dualprice/adapters/parsing/price_parser.py
"""
Price Parser - Amount Extraction from Rendered Prices

Reads a numeric amount out of host-rendered price markup. Handles both
"1,234.56" and "1.234,56" conventions by treating whichever separator comes
last as the decimal separator, and walks a fixed fallback chain of
machine-readable attributes and visible text.

Files that USE this module:
- dualprice.application.enhancer (extract_amount for every price element)
- dualprice.application.email_vars (parse_total for email template totals)
- dualprice.app (parse_price for the convert command)
- tests.test_price_parser (unit tests)

Files that this module USES:
- dualprice.domain.models (extraction order constants)
- bs4 (Tag and markup stripping)
"""
from __future__ import annotations

import re
from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

from dualprice.domain.models import ORDER_TEXT


# Machine-readable sources, most specific first; "content" is schema.org markup
PRICE_ATTRIBUTES = ("data-value", "data-raw-value", "data-price", "content")

_NOT_NUMERIC = re.compile(r"[^0-9,.]")
# Punctuation detached from digits on both sides, e.g. the period of "лв."
_STRAY_SEPARATOR = re.compile(r"(?<!\d)[,.](?!\d)")
_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def parse_price(raw: Any) -> Optional[float]:
    """
    Parse a price string into a float.

    Strips everything except digits, commas and periods. When both separators
    are present the one occurring last is the decimal separator and the other
    is dropped; a lone comma is a decimal separator. Separators touching no
    digit (the period of "лв.") are ignored before the rule is applied, so
    "1,234." still reads its period as decimal. The longest leading number of
    the normalised string is used, so "1.234.567" parses as 1.234.

    Args:
        raw: Price text, e.g. "1.234,56 лв" or "€1,234.56"

    Returns:
        Parsed value, or None if no number could be read
    """
    if raw is None:
        return None
    cleaned = _NOT_NUMERIC.sub("", _STRAY_SEPARATOR.sub("", str(raw)))
    if not cleaned:
        return None

    if "," in cleaned and "." in cleaned:
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".", 1)
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        cleaned = cleaned.replace(",", ".", 1)

    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return None
    try:
        return float(match.group(0))
    except ValueError:
        return None


def _positive(value: Optional[float]) -> Optional[float]:
    if value is None or value <= 0:
        return None
    return value


def _from_attributes(tag: Tag) -> Optional[float]:
    for attr in PRICE_ATTRIBUTES:
        value = tag.get(attr)
        if value is None:
            continue
        if isinstance(value, list):
            value = " ".join(value)
        amount = _positive(parse_price(value))
        if amount is not None:
            return amount
    return None


def _from_text(tag: Tag) -> Optional[float]:
    return _positive(parse_price(tag.get_text()))


def extract_amount(tag: Tag, order: str = "attributes") -> Optional[float]:
    """
    Extract the primary amount from a price element.

    Attribute-first order (default) tries data-value, data-raw-value,
    data-price and content before the visible text; text-first order reads
    the visible text before those attributes. The first source yielding a
    positive amount wins; zero counts as "no amount".

    Args:
        tag: Price element
        order: "attributes" or "text"

    Returns:
        Positive amount, or None
    """
    if order == ORDER_TEXT:
        chain = (_from_text, _from_attributes)
    else:
        chain = (_from_attributes, _from_text)
    for source in chain:
        amount = source(tag)
        if amount is not None:
            return amount
    return None


def parse_total(rendered: Any) -> Optional[float]:
    """
    Parse an already rendered total such as '<span>1 234,56 лв.</span>'.

    Markup is stripped before parsing; non-positive totals yield None.

    Args:
        rendered: Rendered total, possibly containing HTML

    Returns:
        Positive amount, or None
    """
    if rendered is None:
        return None
    text = BeautifulSoup(str(rendered), "html.parser").get_text()
    return _positive(parse_price(text))
