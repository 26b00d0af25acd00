"""Investment metrics derived from listing records.

All functions are pure: they read listings and return numbers, never
touching store state.

Formulas:
    potential gain = market value (0 if unknown) - price
    ROI %          = potential gain / price * 100, one decimal
"""

from __future__ import annotations

from datetime import date, timezone
from typing import Optional, Sequence

from listing_tracker.common.models import Listing

from .models import MarketSummary, ScoreBucket

DEFAULT_HIGH_SCORE_THRESHOLD = 8.5

# (lower bound inclusive, bucket), highest first
SCORE_TIERS: tuple[tuple[float, ScoreBucket], ...] = (
    (9.0, ScoreBucket.HIGH),
    (8.0, ScoreBucket.MEDIUM_HIGH),
    (7.0, ScoreBucket.MEDIUM),
)


def potential_gain(listing: Listing) -> float:
    """Market value minus asking price; unknown market value counts as 0."""
    return (listing.market_value or 0) - listing.price


def roi_percentage(listing: Listing) -> Optional[float]:
    """Potential gain as a percentage of price, rounded to one decimal.

    Returns None when the price is zero, where the ratio is undefined.
    """
    if listing.price == 0:
        return None
    return round(potential_gain(listing) / listing.price * 100, 1)


def score_bucket(score: Optional[float]) -> ScoreBucket:
    """Map an investment score to its tier."""
    if score is None:
        return ScoreBucket.UNKNOWN
    for lower_bound, bucket in SCORE_TIERS:
        if score >= lower_bound:
            return bucket
    return ScoreBucket.LOW


def average_price(listings: Sequence[Listing]) -> float:
    """Mean asking price, or 0 for an empty sequence."""
    if not listings:
        return 0
    return sum(l.price for l in listings) / len(listings)


def high_score_count(
    listings: Sequence[Listing],
    threshold: float = DEFAULT_HIGH_SCORE_THRESHOLD,
) -> int:
    """Number of listings with a known investment score at or above threshold."""
    return sum(
        1
        for l in listings
        if l.investment_score is not None and l.investment_score >= threshold
    )


def new_today_count(listings: Sequence[Listing], today: date) -> int:
    """Number of listings first seen on the given UTC date.

    Naive timestamps are taken to be UTC already.
    """
    count = 0
    for l in listings:
        seen = l.first_seen
        if seen.tzinfo is not None:
            seen = seen.astimezone(timezone.utc)
        if seen.date() == today:
            count += 1
    return count


def summarize_market(
    listings: Sequence[Listing],
    today: date,
    threshold: float = DEFAULT_HIGH_SCORE_THRESHOLD,
) -> MarketSummary:
    """Aggregate figures shown in the market overview."""
    return MarketSummary(
        total_listings=len(listings),
        average_price=average_price(listings),
        high_score_count=high_score_count(listings, threshold),
        new_today=new_today_count(listings, today),
    )
