# src/dualprice/application/email_vars.py
"""
Email Template Totals - Secondary Amounts for Order Emails

Adds secondary-currency variables next to the order totals a storefront
passes to its email templates, e.g. ``{TOTAL_PAID}`` gains
``{TOTAL_PAID_SECONDARY}``.

Files that USE this module:
- dualprice.app (email-vars command)
- tests.test_email_vars (unit tests)

Files that this module USES:
- dualprice.adapters.parsing.price_parser (parse_total)
- dualprice.adapters.formatting.formatter (format_secondary)
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from dualprice.adapters.formatting.formatter import format_secondary
from dualprice.adapters.parsing.price_parser import parse_total
from dualprice.domain.models import SettingsSnapshot

log = logging.getLogger(__name__)

TOTAL_KEYS = (
    "total_paid",
    "total_products",
    "total_shipping",
    "total_tax",
    "total_discounts",
)


def template_key(name: str) -> str:
    """Return the template placeholder for a variable name: total_paid -> {TOTAL_PAID}."""
    return "{" + name.upper() + "}"


def alter_template_vars(template_vars: Mapping[str, Any], snapshot: SettingsSnapshot) -> Dict[str, Any]:
    """
    Add ``{<TOTAL>_SECONDARY}`` variables for every known order total.

    Totals that are absent, unparseable or not positive are skipped. Nothing
    is added unless secondary prices and email variables are both enabled.

    Args:
        template_vars: Template variables (rendered, possibly HTML, totals)
        snapshot: Settings snapshot

    Returns:
        New dictionary with the original variables plus secondary totals
    """
    result = dict(template_vars)
    if not snapshot.is_active or not snapshot.enable_emails:
        return result

    for name in TOTAL_KEYS:
        key = template_key(name)
        if key not in result:
            continue
        formatted = format_secondary(parse_total(result[key]), snapshot)
        if formatted is None:
            log.debug("No secondary value for %s (%r)", key, result[key])
            continue
        result[template_key(f"{name}_secondary")] = formatted
    return result
