"""Watchlist — Bookmarked listing ids for the current session.

Membership is independent of the loaded listings: an id stays bookmarked
even when a later load no longer returns that listing.

Usage:
    watchlist = WatchlistStore()
    watchlist.toggle("42")      # True, now watched
    "42" in watchlist           # True

    # Keep bookmarks between sessions
    watchlist = WatchlistStore(path=Path("data/watchlist.json"))
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class WatchlistStore:
    """Set of bookmarked listing ids.

    Backed by a dict so iteration follows insertion order; order carries
    no meaning. When ``path`` is given the set is read from and written
    to that JSON file.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._ids: dict[str, None] = {}

        if self.path is not None and self.path.exists():
            self._load()

    def __contains__(self, listing_id: object) -> bool:
        return listing_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._ids)

    def contains(self, listing_id: str) -> bool:
        return listing_id in self._ids

    def add(self, listing_id: str) -> None:
        """Bookmark a listing. No-op if already bookmarked."""
        if listing_id in self._ids:
            return
        self._ids[listing_id] = None
        logger.debug("Added %s to watchlist", listing_id)
        self._save()

    def remove(self, listing_id: str) -> None:
        """Drop a bookmark. No-op if not bookmarked."""
        if listing_id not in self._ids:
            return
        del self._ids[listing_id]
        logger.debug("Removed %s from watchlist", listing_id)
        self._save()

    def toggle(self, listing_id: str) -> bool:
        """Flip membership and return whether the id is now bookmarked."""
        if self.contains(listing_id):
            self.remove(listing_id)
            return False
        self.add(listing_id)
        return True

    # --- Local Persistence ---

    def _save(self) -> None:
        """Save bookmarks to the JSON file, if one is configured."""
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "ids": list(self._ids),
            "last_updated": datetime.now().isoformat(),
        }
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def _load(self) -> None:
        """Load bookmarks from the JSON file."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            ids = data.get("ids", [])
            if not isinstance(ids, list):
                raise TypeError(f"ids must be a list, got {type(ids).__name__}")
            self._ids = dict.fromkeys(str(i) for i in ids)
            logger.info("Loaded %d watchlist entries from %s", len(self._ids), self.path)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            logger.warning("Could not load watchlist from %s: %s", self.path, e)
            self._ids = {}
