"""Data models for derived listing metrics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScoreBucket(str, Enum):
    """Investment score tier, ordered from best to unrated."""
    HIGH = "high"  # >= 9
    MEDIUM_HIGH = "medium-high"  # 8 <= s < 9
    MEDIUM = "medium"  # 7 <= s < 8
    LOW = "low"  # < 7
    UNKNOWN = "unknown"  # no score


@dataclass(frozen=True)
class MarketSummary:
    """Aggregate figures over one listing set."""
    total_listings: int = 0
    average_price: float = 0
    high_score_count: int = 0
    new_today: int = 0

    @property
    def rounded_average_price(self) -> int:
        """Average price rounded to a whole currency unit for display."""
        return int(round(self.average_price))

    def to_dict(self) -> dict:
        return {
            "total_listings": self.total_listings,
            "average_price": self.rounded_average_price,
            "high_score_count": self.high_score_count,
            "new_today": self.new_today,
        }
