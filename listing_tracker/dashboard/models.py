"""View models composed by the dashboard controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from listing_tracker.common.models import Listing
from listing_tracker.listings.models import DataProvenance
from listing_tracker.metrics.models import MarketSummary, ScoreBucket


class ViewTab(str, Enum):
    """Dashboard tabs; exactly one is active."""
    OPPORTUNITIES = "opportunities"
    WATCHLIST = "watchlist"
    MARKET = "market"


TAB_LABELS: dict[ViewTab, str] = {
    ViewTab.OPPORTUNITIES: "Investment Opportunities",
    ViewTab.WATCHLIST: "Watchlist",
    ViewTab.MARKET: "Market Data",
}


class ConnectionStatus(str, Enum):
    """Data provenance as shown to the operator."""
    CONNECTED = "connected"
    SAMPLE_DATA = "sample_data"
    NOT_LOADED = "not_loaded"

    @classmethod
    def from_provenance(cls, provenance: DataProvenance) -> ConnectionStatus:
        return {
            DataProvenance.LIVE: cls.CONNECTED,
            DataProvenance.SAMPLE: cls.SAMPLE_DATA,
            DataProvenance.PENDING: cls.NOT_LOADED,
        }[provenance]

    @property
    def label(self) -> str:
        return {
            ConnectionStatus.CONNECTED: "Connected to Supabase",
            ConnectionStatus.SAMPLE_DATA: "Using sample data (check connection)",
            ConnectionStatus.NOT_LOADED: "Not loaded yet",
        }[self]


@dataclass(frozen=True)
class ViewState:
    """Active tab. Selecting any tab from any state is valid."""
    active: ViewTab = ViewTab.OPPORTUNITIES

    def select(self, tab: ViewTab | str) -> ViewState:
        return ViewState(active=ViewTab(tab))


@dataclass(frozen=True)
class ListingRow:
    """One listing with its derived metrics."""
    listing: Listing
    potential_gain: float
    roi_percentage: Optional[float]
    score_bucket: ScoreBucket
    is_watched: bool = False

    def to_dict(self) -> dict:
        return {
            **self.listing.to_dict(),
            "potential_gain": self.potential_gain,
            "roi_percentage": self.roi_percentage,
            "score_bucket": self.score_bucket.value,
            "is_watched": self.is_watched,
        }


@dataclass(frozen=True)
class OpportunitiesView:
    """Every loaded listing plus the market summary over the same set."""
    rows: tuple[ListingRow, ...] = ()
    summary: MarketSummary = field(default_factory=MarketSummary)
    status: ConnectionStatus = ConnectionStatus.NOT_LOADED
    last_updated: Optional[datetime] = None
    is_loading: bool = False
    tab: ViewTab = field(default=ViewTab.OPPORTUNITIES, init=False)

    def to_dict(self) -> dict:
        return {
            "tab": self.tab.value,
            "status": self.status.value,
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
            "is_loading": self.is_loading,
            "summary": self.summary.to_dict(),
            "listings": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class WatchlistView:
    """Loaded listings whose id is bookmarked."""
    rows: tuple[ListingRow, ...] = ()
    watched_count: int = 0
    tab: ViewTab = field(default=ViewTab.WATCHLIST, init=False)

    @property
    def missing_count(self) -> int:
        """Bookmarks whose listing is not in the current load."""
        return self.watched_count - len(self.rows)

    def to_dict(self) -> dict:
        return {
            "tab": self.tab.value,
            "watched_count": self.watched_count,
            "listings": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class MarketView:
    """Aggregate market and connectivity figures, no per-listing detail."""
    summary: MarketSummary = field(default_factory=MarketSummary)
    status: ConnectionStatus = ConnectionStatus.NOT_LOADED
    last_updated: Optional[datetime] = None
    is_loading: bool = False
    watched_count: int = 0
    last_error: Optional[str] = None
    tab: ViewTab = field(default=ViewTab.MARKET, init=False)

    def to_dict(self) -> dict:
        return {
            "tab": self.tab.value,
            "status": self.status.value,
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
            "is_loading": self.is_loading,
            "watched_count": self.watched_count,
            "last_error": self.last_error,
            "summary": self.summary.to_dict(),
        }
