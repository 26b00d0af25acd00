"""Listing store — Hold the current listing set and its refresh state.

A load replaces the whole listing set. Failed loads never raise to the
caller: the set is replaced by a single sample record and the failure is
logged for operators. Each load is stamped with a generation number and
only the most recently issued load may write its result.

Usage:
    store = ListingStore(ListingSource())
    snapshot = store.load()
    print(snapshot.provenance, len(snapshot.listings))
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

import requests
from pydantic import ValidationError

from listing_tracker.common.models import Listing

from .fallback import build_fallback_listing
from .models import DataProvenance, ListingFetchError, ListingSnapshot
from .source import ListingSource

logger = logging.getLogger(__name__)

# Failures that switch the store to sample data
LOAD_ERRORS = (requests.RequestException, ListingFetchError, ValueError)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_listings(rows: Iterable[Any]) -> list[Listing]:
    """Validate raw rows into Listing records.

    Rows that fail validation, and rows repeating an id already seen in
    the same response, are dropped with a warning. Order is preserved.
    """
    listings: list[Listing] = []
    seen: set[str] = set()
    for index, row in enumerate(rows):
        try:
            listing = Listing.model_validate(row)
        except ValidationError as e:
            logger.warning(
                "Dropping malformed listing at index %d: %d validation error(s): %s",
                index,
                e.error_count(),
                e.errors()[0]["msg"],
            )
            continue
        if listing.id in seen:
            logger.warning("Dropping duplicate listing id %s at index %d", listing.id, index)
            continue
        seen.add(listing.id)
        listings.append(listing)
    return listings


class ListingStore:
    """Owns the listing snapshot for one client session."""

    def __init__(
        self,
        source: ListingSource,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._source = source
        self._clock = clock
        self._snapshot = ListingSnapshot()
        self._issued = 0

    # --- State ---

    @property
    def snapshot(self) -> ListingSnapshot:
        return self._snapshot

    @property
    def listings(self) -> tuple[Listing, ...]:
        return self._snapshot.listings

    @property
    def last_updated(self) -> Optional[datetime]:
        return self._snapshot.last_updated

    @property
    def is_loading(self) -> bool:
        return self._snapshot.is_loading

    @property
    def provenance(self) -> DataProvenance:
        return self._snapshot.provenance

    # --- Load transitions ---

    def begin_load(self) -> int:
        """Mark a load as started and return its generation number."""
        self._issued += 1
        self._snapshot = replace(self._snapshot, is_loading=True)
        logger.debug("Listing load %d started", self._issued)
        return self._issued

    def _is_stale(self, generation: int) -> bool:
        if generation != self._issued:
            logger.info(
                "Discarding result of listing load %d (latest is %d)",
                generation,
                self._issued,
            )
            return True
        return False

    def complete_load(self, generation: int, rows: Iterable[Any]) -> bool:
        """Apply a successful response. Returns False if it was stale."""
        if self._is_stale(generation):
            return False

        listings = parse_listings(rows)
        self._snapshot = ListingSnapshot(
            listings=tuple(listings),
            last_updated=self._clock(),
            is_loading=False,
            provenance=DataProvenance.LIVE,
            last_error=None,
            generation=generation,
        )
        logger.info("Loaded %d listings", len(listings))
        return True

    def fail_load(self, generation: int, error: BaseException | str) -> bool:
        """Replace the listings with the sample record. Returns False if stale."""
        if self._is_stale(generation):
            return False

        logger.error("Error loading listings: %s (showing sample data)", error)
        self._snapshot = ListingSnapshot(
            listings=(build_fallback_listing(self._clock()),),
            last_updated=self._snapshot.last_updated,
            is_loading=False,
            provenance=DataProvenance.SAMPLE,
            last_error=str(error),
            generation=generation,
        )
        return True

    def _abandon_load(self, generation: int) -> None:
        """Clear the loading flag for a load that raised, keeping the listings."""
        if generation == self._issued and self._snapshot.is_loading:
            logger.warning("Listing load %d aborted by an unexpected error", generation)
            self._snapshot = replace(self._snapshot, is_loading=False)

    def load(self) -> ListingSnapshot:
        """Fetch listings and replace the held set.

        Never raises for transport, status or payload errors; the
        returned snapshot always holds at least one listing unless the
        store answered with an empty array.
        """
        generation = self.begin_load()
        try:
            rows = self._source.fetch()
        except LOAD_ERRORS as e:
            self.fail_load(generation, e)
        except BaseException:
            self._abandon_load(generation)
            raise
        else:
            self.complete_load(generation, rows)
        return self._snapshot

    async def load_async(self) -> ListingSnapshot:
        """Same as load(), with the blocking fetch moved off the event loop."""
        generation = self.begin_load()
        try:
            rows = await asyncio.to_thread(self._source.fetch)
        except LOAD_ERRORS as e:
            self.fail_load(generation, e)
        except BaseException:
            self._abandon_load(generation)
            raise
        else:
            self.complete_load(generation, rows)
        return self._snapshot
