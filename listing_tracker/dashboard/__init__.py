# Dashboard — Tab state, view composition and rendering
"""
Dashboard module for browsing listings:
- controller: tab state machine and derived views
- formatter: plain-text rendering for the terminal
- renderer: Jinja2 HTML rendering
- main: command-line entry point
"""

from .controller import ViewController
from .models import (
    ConnectionStatus,
    ListingRow,
    MarketView,
    OpportunitiesView,
    ViewState,
    ViewTab,
    WatchlistView,
)
from .renderer import DashboardRenderer

__all__ = [
    "ConnectionStatus",
    "DashboardRenderer",
    "ListingRow",
    "MarketView",
    "OpportunitiesView",
    "ViewController",
    "ViewState",
    "ViewTab",
    "WatchlistView",
]
