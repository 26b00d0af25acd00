# Metrics — Investment figures derived from listings
"""
Pure functions computing per-listing gain, ROI and score tier, and
aggregate market figures over a listing set.
"""

from .calculator import (
    DEFAULT_HIGH_SCORE_THRESHOLD,
    average_price,
    high_score_count,
    new_today_count,
    potential_gain,
    roi_percentage,
    score_bucket,
    summarize_market,
)
from .models import MarketSummary, ScoreBucket

__all__ = [
    "DEFAULT_HIGH_SCORE_THRESHOLD",
    "MarketSummary",
    "ScoreBucket",
    "average_price",
    "high_score_count",
    "new_today_count",
    "potential_gain",
    "roi_percentage",
    "score_bucket",
    "summarize_market",
]
