"""Dashboard controller — Tab selection and view composition.

Combines the listing store, the metrics functions and the watchlist into
the view models the renderers display. Views are derived on request from
the current state, so they always reflect the latest load and bookmarks.

Usage:
    controller = ViewController(ListingStore(ListingSource()), WatchlistStore())
    controller.start()                  # exactly one initial load
    controller.toggle_watch("42")
    controller.select_view("watchlist")
    view = controller.current_view()
"""

from __future__ import annotations

import logging
import webbrowser
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence, Union

from listing_tracker.common.config import Settings, settings as default_settings
from listing_tracker.common.models import Listing
from listing_tracker.listings.models import ListingSnapshot
from listing_tracker.listings.store import ListingStore
from listing_tracker.metrics.calculator import (
    potential_gain,
    roi_percentage,
    score_bucket,
    summarize_market,
)
from listing_tracker.metrics.models import MarketSummary
from listing_tracker.watchlist.store import WatchlistStore

from .models import (
    ConnectionStatus,
    ListingRow,
    MarketView,
    OpportunitiesView,
    ViewState,
    ViewTab,
    WatchlistView,
)

logger = logging.getLogger(__name__)

DashboardView = Union[OpportunitiesView, WatchlistView, MarketView]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ViewController:
    """Holds the active tab and builds views for one client session."""

    def __init__(
        self,
        listing_store: ListingStore,
        watchlist: Optional[WatchlistStore] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utcnow,
        opener: Callable[[str], object] = webbrowser.open_new_tab,
    ) -> None:
        self.listing_store = listing_store
        self.watchlist = watchlist if watchlist is not None else WatchlistStore()
        self._settings = settings or default_settings
        self._clock = clock
        self._opener = opener
        self._state = ViewState()
        self._started = False

    # --- Session lifecycle ---

    def start(self) -> ListingSnapshot:
        """Issue the initial load. Later calls do not load again."""
        if self._started:
            return self.listing_store.snapshot
        self._started = True
        return self.listing_store.load()

    @property
    def can_refresh(self) -> bool:
        """Whether the refresh control should be enabled."""
        return not self.listing_store.is_loading

    def refresh(self) -> ListingSnapshot:
        """Reload listings. Not blocked while another load is outstanding."""
        return self.listing_store.load()

    # --- Tab state ---

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def active_view(self) -> ViewTab:
        return self._state.active

    def select_view(self, tab: ViewTab | str) -> ViewTab:
        """Switch tabs. Raises ValueError for a name outside ViewTab."""
        self._state = self._state.select(tab)
        return self._state.active

    # --- Bookmarks and navigation ---

    def toggle_watch(self, listing_id: str) -> bool:
        watched = self.watchlist.toggle(listing_id)
        logger.info("%s %s", "Watching" if watched else "Unwatched", listing_id)
        return watched

    def open_listing(self, listing_id: str) -> Optional[str]:
        """Open a loaded listing's URL in a new browser tab.

        Returns the URL, or None if the id is not in the current load.
        """
        listing = self.listing_store.snapshot.find(listing_id)
        if listing is None:
            logger.warning("Cannot open listing %s: not in current load", listing_id)
            return None
        self._opener(listing.url)
        return listing.url

    # --- Derived views ---

    def build_row(self, listing: Listing) -> ListingRow:
        return ListingRow(
            listing=listing,
            potential_gain=potential_gain(listing),
            roi_percentage=roi_percentage(listing),
            score_bucket=score_bucket(listing.investment_score),
            is_watched=listing.id in self.watchlist,
        )

    def _rows(self, listings: Sequence[Listing]) -> tuple[ListingRow, ...]:
        return tuple(self.build_row(l) for l in listings)

    def _summary(self, listings: Sequence[Listing]) -> MarketSummary:
        return summarize_market(
            listings,
            today=self._clock().date(),
            threshold=self._settings.metrics.high_score_threshold,
        )

    def opportunities_view(self) -> OpportunitiesView:
        snapshot = self.listing_store.snapshot
        return OpportunitiesView(
            rows=self._rows(snapshot.listings),
            summary=self._summary(snapshot.listings),
            status=ConnectionStatus.from_provenance(snapshot.provenance),
            last_updated=snapshot.last_updated,
            is_loading=snapshot.is_loading,
        )

    def watchlist_view(self) -> WatchlistView:
        snapshot = self.listing_store.snapshot
        watched = [l for l in snapshot.listings if l.id in self.watchlist]
        return WatchlistView(
            rows=self._rows(watched),
            watched_count=len(self.watchlist),
        )

    def market_view(self) -> MarketView:
        snapshot = self.listing_store.snapshot
        return MarketView(
            summary=self._summary(snapshot.listings),
            status=ConnectionStatus.from_provenance(snapshot.provenance),
            last_updated=snapshot.last_updated,
            is_loading=snapshot.is_loading,
            watched_count=len(self.watchlist),
            last_error=snapshot.last_error,
        )

    def current_view(self) -> DashboardView:
        """Build the view for the active tab."""
        builders = {
            ViewTab.OPPORTUNITIES: self.opportunities_view,
            ViewTab.WATCHLIST: self.watchlist_view,
            ViewTab.MARKET: self.market_view,
        }
        return builders[self._state.active]()
