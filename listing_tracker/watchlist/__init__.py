# Watchlist — Bookmarked listings
from .store import WatchlistStore

__all__ = ["WatchlistStore"]
