"""State models for the listing store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from listing_tracker.common.models import Listing


class ListingFetchError(RuntimeError):
    """The listings endpoint answered with a payload that is not a record array."""


class DataProvenance(str, Enum):
    """Where the currently held listings came from."""
    PENDING = "pending"  # no load has completed yet
    LIVE = "live"
    SAMPLE = "sample"


@dataclass(frozen=True)
class ListingSnapshot:
    """Immutable view of the listing store state.

    Every load transition produces a new snapshot; nothing mutates one
    in place.
    """
    listings: tuple[Listing, ...] = ()
    last_updated: Optional[datetime] = None
    is_loading: bool = False
    provenance: DataProvenance = DataProvenance.PENDING
    last_error: Optional[str] = None
    generation: int = 0

    @property
    def is_live(self) -> bool:
        return self.provenance == DataProvenance.LIVE

    def find(self, listing_id: str) -> Optional[Listing]:
        """Return the listing with the given id, if loaded."""
        return next((l for l in self.listings if l.id == listing_id), None)
