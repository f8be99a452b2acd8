# src/dualprice/adapters/dom/fetcher.py
"""
Page Fetcher - Storefront HTML Retrieval

Downloads a rendered storefront page so the command line can preview the
secondary labels on a live shop.

Files that USE this module:
- dualprice.app (enhance command with an http(s) source)
- tests.test_fetcher (unit tests)

Files that this module USES:
- requests (HTTP client)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Standard library for logging messages

import requests  # HTTP library for making web requests

log = logging.getLogger(__name__)  # Create logger for this module

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


def fetch_page(url: str, timeout: int = 10) -> str:
    """
    Fetch HTML content from a URL.

    Args:
        url: Page URL
        timeout: HTTP request timeout in seconds

    Returns:
        HTML content as string

    Raises:
        RuntimeError: If the request fails or times out
    """
    try:
        log.info("Fetching HTML from %s", url)
        resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        resp.raise_for_status()
        return resp.text
    except requests.exceptions.Timeout as e:
        log.error("Fetch timeout after %d seconds for %s", timeout, url)
        raise RuntimeError(f"Fetch timeout after {timeout}s for {url}") from e
    except requests.exceptions.RequestException as e:
        log.error("Fetch failed for %s: %s", url, e)
        raise RuntimeError(f"Fetch failed for {url}: {e}") from e
