"""Sample listing shown when the remote store cannot be reached."""

from __future__ import annotations

from datetime import datetime, timezone

from listing_tracker.common.models import Listing

FALLBACK_LISTING_ID = "1"


def build_fallback_listing(now: datetime | None = None) -> Listing:
    """Build the deterministic sample record.

    Only ``first_seen`` depends on the clock; every other field is fixed.
    """
    first_seen = now or datetime.now(timezone.utc)
    return Listing(
        id=FALLBACK_LISTING_ID,
        source="autoscout24",
        model="997.1 Carrera S",
        year=2007,
        price=52900,
        currency="EUR",
        mileage=89500,
        transmission="manual",
        color="Guards Red",
        country="DE",
        city="Munich",
        seller_type="dealer",
        investment_score=9.2,
        market_value=61000,
        rarity_score="high",
        description="Excellent condition 997.1 Carrera S",
        images_count=15,
        first_seen=first_seen,
        status="active",
        url="https://autoscout24.de/listing/123456",
    )
