"""CLI entry point for the listing dashboard.

Usage:
    # Ranked opportunities as text
    python -m listing_tracker.dashboard.main

    # Bookmark two listings and show the watchlist
    python -m listing_tracker.dashboard.main --watch 42 --watch 57 --tab watchlist

    # Keep bookmarks between runs and export the market tab as HTML
    python -m listing_tracker.dashboard.main --watchlist-file data/watchlist.json \
        --tab market --html data/exports/market.html

    # Open a listing in the browser
    python -m listing_tracker.dashboard.main --open 42
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from listing_tracker.common.config import Settings
from listing_tracker.common.logging import setup_logging
from listing_tracker.listings.source import ListingSource
from listing_tracker.listings.store import ListingStore
from listing_tracker.watchlist.store import WatchlistStore

from .controller import ViewController
from .formatter import format_view
from .models import ViewTab
from .renderer import DashboardRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse ranked manual-transmission listings and their investment metrics",
    )
    parser.add_argument(
        "--tab",
        choices=[t.value for t in ViewTab],
        default=ViewTab.OPPORTUNITIES.value,
        help="View to show (default: opportunities)",
    )
    parser.add_argument(
        "--watch",
        action="append",
        default=[],
        metavar="ID",
        help="Toggle a listing id on the watchlist (repeatable)",
    )
    parser.add_argument(
        "--watchlist-file",
        type=Path,
        help="JSON file that keeps the watchlist between runs",
    )
    parser.add_argument("--html", type=Path, help="Write the view as an HTML page to this path")
    parser.add_argument("--json", action="store_true", help="Print the view as JSON")
    parser.add_argument("--open", metavar="ID", help="Open a listing URL in the browser")
    parser.add_argument("--settings", type=Path, help="Alternate settings YAML file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one dashboard session and return the exit status."""
    settings = Settings.load(args.settings)

    with ListingSource(settings=settings) as source:
        controller = ViewController(
            ListingStore(source),
            WatchlistStore(path=args.watchlist_file),
            settings=settings,
        )
        controller.start()

    for listing_id in args.watch:
        controller.toggle_watch(listing_id)

    if args.open:
        url = controller.open_listing(args.open)
        if url is None:
            logger.error("Listing %s is not in the current results", args.open)
            return 1
        logger.info("Opened %s", url)

    controller.select_view(args.tab)
    view = controller.current_view()

    if args.html:
        path = DashboardRenderer(display=settings.display).write(
            view, args.html, can_refresh=controller.can_refresh
        )
        logger.info("Dashboard written to %s", path)
    elif args.json:
        print(json.dumps(view.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_view(view, settings.display))

    return 0


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    # stdout carries the rendered view (and JSON), so logs go to stderr
    setup_logging(level=level, module_name="listing_tracker", stream=sys.stderr)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
