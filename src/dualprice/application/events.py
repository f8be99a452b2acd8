# src/dualprice/application/events.py
"""
Event Wiring - Page Readiness and Storefront Update Events

Connects the enhancement engine to page lifecycle signals: a document-ready
signal plus the storefront's cart/product update notifications. Every
trigger re-resolves the configuration and runs a full scan to completion.

Files that USE this module:
- dualprice.app (enhance command fires ready and update events)
- tests.test_events (unit tests)

Files that this module USES:
- dualprice.adapters.dom.document (load_document)
- dualprice.application.enhancer (run_full_scan)
- dualprice.application.regions (default region table)
- dualprice.config.resolver (resolve)
"""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from bs4 import BeautifulSoup

from dualprice.adapters.dom.document import load_document
from dualprice.application.enhancer import run_full_scan
from dualprice.application.regions import REGIONS
from dualprice.config.resolver import resolve
from dualprice.domain.models import Region, SettingsSnapshot

logger = logging.getLogger(__name__)

DOCUMENT_READY = "DOMContentLoaded"
UPDATE_EVENTS = ("updatedCart", "updateProduct", "updatedProduct")

Handler = Callable[..., Any]


class EventBus:
    """
    Minimal synchronous publish/subscribe bus.

    Handlers run in subscription order on the emitting call stack, so one
    notification's work completes before the next notification starts.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def on(self, name: str, handler: Handler) -> None:
        """Subscribe ``handler`` to ``name``."""
        self._handlers[name].append(handler)

    def off(self, name: str, handler: Handler) -> None:
        """Unsubscribe ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, name: str, *args: Any) -> int:
        """
        Notify every handler subscribed to ``name``.

        Returns:
            Number of handlers invoked
        """
        handlers = list(self._handlers.get(name, []))
        for handler in handlers:
            handler(*args)
        return len(handlers)


class PriceEnhancer:
    """
    Binds a parsed page to the enhancement engine.

    Configuration is either a raw host mapping, a callable returning one, or
    None to load it from the environment; it is resolved into a fresh
    snapshot for every scan.
    """

    def __init__(
        self,
        document: BeautifulSoup,
        config: Optional[Mapping[str, Any] | Callable[[], Mapping[str, Any]]] = None,
        regions: Iterable[Region] = REGIONS,
    ):
        """
        Initialize the enhancer.

        Args:
            document: Parsed storefront page
            config: Host configuration mapping, a zero-argument callable returning it, or None
            regions: Region table scanned on every trigger
        """
        self.document = document
        self.config = config
        self.regions = tuple(regions)
        self.scans = 0

    @classmethod
    def from_html(cls, html: str, config=None, regions: Iterable[Region] = REGIONS) -> "PriceEnhancer":
        """Create an enhancer for raw page HTML."""
        return cls(load_document(html), config, regions)

    def snapshot(self) -> SettingsSnapshot:
        """Resolve the configuration snapshot for one scan."""
        raw = self.config() if callable(self.config) else self.config
        return resolve(raw)

    def refresh_all(self, *_event_args: Any) -> int:
        """
        Resolve configuration and run a full scan.

        Accepts and ignores event payloads so it can be subscribed directly.

        Returns:
            Number of labels inserted by this scan
        """
        self.scans += 1
        return run_full_scan(self.document, self.snapshot(), self.regions)

    def attach(self, document_events: EventBus, host_bus: Any = None) -> None:
        """
        Subscribe to page readiness and, when available, storefront updates.

        Args:
            document_events: Bus emitting the document-ready signal
            host_bus: Storefront event bus exposing ``on(name, handler)``;
                      None or an object without ``on`` limits the enhancer
                      to document readiness
        """
        document_events.on(DOCUMENT_READY, self.refresh_all)
        subscribe = getattr(host_bus, "on", None)
        if not callable(subscribe):
            logger.debug("No storefront event bus; enhancing on document ready only")
            return
        for name in UPDATE_EVENTS:
            subscribe(name, self.refresh_all)
        logger.debug("Subscribed to storefront events: %s", ", ".join(UPDATE_EVENTS))
