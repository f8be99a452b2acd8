# src/dualprice/application/enhancer.py
"""
Price Enhancement Engine - Secondary Label Injection

Scans the regions of a storefront page, reads the primary amount of every
matching price element, converts and formats it, and appends exactly one
secondary label. Scans are pure functions of (document, snapshot): running
one twice leaves the page unchanged the second time.

Files that USE this module:
- dualprice.application.events (PriceEnhancer.refresh_all runs full scans)
- tests.test_enhancer (unit tests)

Files that this module USES:
- dualprice.adapters.dom.document (queries, label guard, label insertion)
- dualprice.adapters.parsing.price_parser (extract_amount)
- dualprice.adapters.formatting.formatter (make_label)
- dualprice.application.regions (default region table)
- dualprice.shared.language (document locale)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from babel import Locale
from bs4 import BeautifulSoup, Tag

from dualprice.adapters.dom.document import append_label, has_secondary_label, select_unique
from dualprice.adapters.formatting.formatter import make_label
from dualprice.adapters.parsing.price_parser import extract_amount
from dualprice.application.regions import REGIONS
from dualprice.domain.models import Region, SecondaryLabel, SettingsSnapshot
from dualprice.shared.language import document_language, resolve_locale

log = logging.getLogger(__name__)


def ensure_secondary_label(
    tag: Tag,
    snapshot: SettingsSnapshot,
    locale: Optional[Locale] = None,
) -> Optional[SecondaryLabel]:
    """
    Append a secondary label to one price element if it has none yet.

    Args:
        tag: Price element
        snapshot: Settings snapshot for this scan
        locale: Number formatting locale (default: snapshot locale)

    Returns:
        The appended label, or None if the element was skipped
    """
    if tag is None or has_secondary_label(tag):
        return None
    amount = extract_amount(tag, snapshot.extraction_order)
    label = make_label(amount, snapshot, locale)
    if label is None:
        return None
    append_label(tag, label)
    return label


def enhance_region(
    document: BeautifulSoup,
    region: Region,
    snapshot: SettingsSnapshot,
    locale: Optional[Locale] = None,
) -> int:
    """
    Label every price element inside one region.

    A disabled region flag or a page without the region container is a
    no-op. Failures are isolated per element and never propagate.

    Args:
        document: Parsed page
        region: Region definition
        snapshot: Settings snapshot for this scan
        locale: Number formatting locale

    Returns:
        Number of labels inserted
    """
    if not snapshot.is_region_enabled(region.flag):
        return 0
    containers = document.select(region.container)
    if not containers:
        return 0

    inserted = 0
    for tag in select_unique(containers, region.candidates):
        try:
            if ensure_secondary_label(tag, snapshot, locale) is not None:
                inserted += 1
        except Exception as e:
            log.debug("Skipping price element <%s> in %s: %s", tag.name, region.name, e, exc_info=True)
    if inserted:
        log.debug("Region %s: %d label(s) inserted", region.name, inserted)
    return inserted


def run_full_scan(
    document: BeautifulSoup,
    snapshot: SettingsSnapshot,
    regions: Iterable[Region] = REGIONS,
) -> int:
    """
    Run every region scan against the page.

    Does nothing when the master switch is off or the rate is not positive.
    The document locale (``<html lang>``) is resolved once per scan.

    Args:
        document: Parsed page
        snapshot: Settings snapshot for this scan
        regions: Region table (default: built-in storefront regions)

    Returns:
        Total number of labels inserted
    """
    if not snapshot.is_active:
        log.debug("Secondary prices inactive (show=%s, rate=%s)", snapshot.show_secondary, snapshot.rate)
        return 0

    locale = resolve_locale(document_language(document), snapshot.default_locale)
    total = 0
    for region in regions:
        try:
            total += enhance_region(document, region, snapshot, locale)
        except Exception as e:
            log.warning("Region %s scan failed: %s", region.name, e, exc_info=True)
    log.info("Full scan finished: %d label(s) inserted", total)
    return total
