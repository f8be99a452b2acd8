# src/dualprice/shared/language.py
"""
Language Management - Document Locale Resolution

Resolves the locale used to group and punctuate secondary amounts. The
locale comes from the host document's declared language (``<html lang>``)
and falls back to a configured default.

Files that USE this module:
- dualprice.adapters.formatting.formatter (resolve_locale for number formatting)
- dualprice.application.enhancer (document_language once per scan)

Files that this module USES:
- babel (CLDR locale data)
"""
import logging
from typing import Optional

from babel import Locale, UnknownLocaleError
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Language constants
LANG_ENGLISH = "en"


def _parse(tag: str) -> Locale:
    return Locale.parse(tag.strip().replace("-", "_"))


def resolve_locale(lang: Optional[str], fallback: str = LANG_ENGLISH) -> Locale:
    """
    Resolve a language tag to a Babel locale.

    Accepts BCP-47 ("bg-BG") and POSIX ("bg_BG") forms. Unknown or empty
    tags resolve to ``fallback``; an unknown fallback resolves to English.

    Args:
        lang: Language tag, usually from ``<html lang>``
        fallback: Locale used when ``lang`` is missing or unknown

    Returns:
        Babel Locale instance
    """
    for candidate in (lang, fallback):
        if not candidate or not candidate.strip():
            continue
        try:
            return _parse(candidate)
        except (UnknownLocaleError, ValueError, TypeError):
            logger.debug("Unknown locale tag %r", candidate)
    return Locale.parse(LANG_ENGLISH)


def document_language(document: BeautifulSoup) -> Optional[str]:
    """
    Return the declared language of a parsed document.

    Args:
        document: Parsed HTML document

    Returns:
        Value of ``<html lang>``, or None when absent or blank
    """
    html = document.find("html")
    if html is None:
        return None
    lang = html.get("lang")
    if isinstance(lang, list):
        lang = " ".join(lang)
    if not lang or not lang.strip():
        return None
    return lang.strip()
