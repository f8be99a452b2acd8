# src/dualprice/app.py
"""
Application Entry Point - Command Line Interface

This module serves as the composition root for the dualprice command. It
wires settings, logging and the enhancement engine together.

Commands:
- enhance: add secondary labels to a saved page or a live storefront URL
- convert: print the secondary label for one primary amount
- email-vars: print email template variables with secondary totals

Files that USE this module:
- dualprice console script (pyproject entry point)
- python -m dualprice (module entry point)

Files that this module USES:
- dualprice.shared.logging_conf (setup_logging for logging configuration)
- dualprice.config (Settings and resolve for configuration)
- dualprice.application (PriceEnhancer, EventBus, alter_template_vars)
- dualprice.adapters.dom (fetch_page, render_document)
- dualprice.adapters.parsing (parse_price)
- dualprice.adapters.formatting (make_label)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command line parsing
import json  # JSON output for email-vars
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from pathlib import Path  # Object-oriented filesystem paths
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from dualprice import __version__
from dualprice.adapters.dom import LABEL_SELECTOR, fetch_page, render_document
from dualprice.adapters.formatting import make_label
from dualprice.adapters.parsing import parse_price
from dualprice.application import DOCUMENT_READY, UPDATE_EVENTS, EventBus, PriceEnhancer, alter_template_vars
from dualprice.config import Settings, resolve
from dualprice.shared.logging_conf import setup_logging

log = logging.getLogger("dualprice.app")


def _load_settings() -> Settings:
    """Load Settings, falling back to defaults when the environment is invalid."""
    try:
        return Settings()
    except ValidationError as e:
        log.warning("Invalid configuration in environment, using defaults: %s", e)
        return Settings.model_construct()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="dualprice",
        description="Show storefront prices in a secondary currency at a fixed rate.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    enhance = sub.add_parser("enhance", help="Add secondary labels to an HTML page.")
    enhance.add_argument("source", help="Path to an HTML file or an http(s) URL.")
    enhance.add_argument("-o", "--output", default=None, help="Write HTML here instead of stdout.")
    enhance.add_argument(
        "-e",
        "--event",
        action="append",
        default=[],
        choices=list(UPDATE_EVENTS),
        help="Storefront update event to replay after document ready (repeatable).",
    )

    convert = sub.add_parser("convert", help="Print the secondary label for a primary amount.")
    convert.add_argument("amount", help='Primary amount as rendered, e.g. "19,55 лв."')
    convert.add_argument("--locale", default=None, help="Locale for number formatting.")

    email = sub.add_parser("email-vars", help="Print email template variables with secondary totals.")
    email.add_argument("pairs", nargs="+", metavar="KEY=VALUE", help="e.g. total_paid=19.55")
    return parser


def _read_source(source: str, timeout: int) -> str:
    if source.startswith(("http://", "https://")):
        return fetch_page(source, timeout=timeout)
    return Path(source).read_text(encoding="utf-8")


def _cmd_enhance(args: argparse.Namespace, settings: Settings) -> int:
    try:
        html = _read_source(args.source, settings.http_timeout_seconds)
    except (RuntimeError, OSError, UnicodeDecodeError) as e:
        log.error("Cannot read %s: %s", args.source, e)
        return 1

    enhancer = PriceEnhancer.from_html(html, settings.to_host_config)
    document_events = EventBus()
    host_bus = EventBus()
    enhancer.attach(document_events, host_bus)

    before = _label_count(enhancer)
    document_events.emit(DOCUMENT_READY)
    for name in args.event:
        host_bus.emit(name)
    inserted = _label_count(enhancer) - before
    log.info("%d secondary label(s) added over %d scan(s)", inserted, enhancer.scans)

    output = render_document(enhancer.document)
    if args.output:
        try:
            Path(args.output).write_text(output, encoding="utf-8")
        except OSError as e:
            log.error("Cannot write %s: %s", args.output, e)
            return 1
    else:
        sys.stdout.write(output)
    return 0


def _label_count(enhancer: PriceEnhancer) -> int:
    return len(enhancer.document.select(LABEL_SELECTOR))


def _cmd_convert(args: argparse.Namespace, settings: Settings) -> int:
    snapshot = resolve(settings.to_host_config())
    label = make_label(parse_price(args.amount), snapshot, args.locale)
    if label is None:
        log.warning("No secondary value for %r", args.amount)
        return 1
    print(label.text)
    return 0


def _parse_pairs(pairs: Sequence[str]) -> Dict[str, Any]:
    template_vars: Dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        key = key.strip().strip("{}").upper()
        template_vars["{" + key + "}"] = value
    return template_vars


def _cmd_email_vars(args: argparse.Namespace, settings: Settings) -> int:
    try:
        template_vars = _parse_pairs(args.pairs)
    except ValueError as e:
        log.error("%s", e)
        return 1
    snapshot = resolve(settings.to_host_config())
    print(json.dumps(alter_template_vars(template_vars, snapshot), ensure_ascii=False, indent=2))
    return 0


COMMANDS = {
    "enhance": _cmd_enhance,
    "convert": _cmd_convert,
    "email-vars": _cmd_email_vars,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the dualprice command line.

    This function:
    1. Loads settings from the environment
    2. Sets up logging (stderr and optional rotating file)
    3. Dispatches to the selected command

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)
    settings = _load_settings()

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    setup_logging(
        level=level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    return COMMANDS[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
