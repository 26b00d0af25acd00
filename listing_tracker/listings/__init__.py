# Listings — Remote listing retrieval and session state
"""
Listing store module: reads ranked listings from the Supabase listings
table and holds the current set, its refresh time and its provenance.
"""

from .fallback import FALLBACK_LISTING_ID, build_fallback_listing
from .models import DataProvenance, ListingFetchError, ListingSnapshot
from .source import ListingSource
from .store import ListingStore, parse_listings

__all__ = [
    "FALLBACK_LISTING_ID",
    "DataProvenance",
    "ListingFetchError",
    "ListingSnapshot",
    "ListingSource",
    "ListingStore",
    "build_fallback_listing",
    "parse_listings",
]
