"""Shared test fixtures for the listing tracker."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Ensure the package is importable without installation
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from listing_tracker.common.config import Settings
from listing_tracker.common.models import Listing
from listing_tracker.listings.source import ListingSource
from listing_tracker.listings.store import ListingStore

FIXED_NOW = datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock():
    """Clock returning a fixed instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def test_settings() -> Settings:
    """Default settings, independent of any local settings.yaml."""
    return Settings()


@pytest.fixture
def sample_listing_data() -> dict:
    """Return one raw listing row as the REST API sends it."""
    return {
        "id": "a1",
        "source": "mobile.de",
        "model": "997.2 Carrera 4S",
        "year": 2010,
        "price": 68500,
        "currency": "EUR",
        "mileage": 54200,
        "transmission": "manual",
        "color": "Basalt Black",
        "country": "DE",
        "city": "Stuttgart",
        "seller_type": "private",
        "investment_score": 8.7,
        "market_value": 74000,
        "rarity_score": "medium",
        "description": "Full service history",
        "images_count": 22,
        "first_seen": "2026-03-14T07:12:00+00:00",
        "status": "active",
        "url": "https://suchen.mobile.de/fahrzeuge/details.html?id=1",
    }


@pytest.fixture
def sample_rows(sample_listing_data) -> list[dict]:
    """Three rows ordered by investment score, one without optional fields."""
    second = {
        **sample_listing_data,
        "id": "b2",
        "model": "997.1 Carrera",
        "price": 41000,
        "market_value": 43500,
        "investment_score": 7.4,
        "first_seen": "2026-03-10T18:00:00+00:00",
    }
    minimal = {
        "id": "c3",
        "source": "autoscout24",
        "model": "997.1 Targa 4",
        "year": 2006,
        "price": 45500,
        "currency": "EUR",
        "transmission": "manual",
        "images_count": 4,
        "first_seen": "2026-03-01T12:00:00Z",
        "status": "active",
        "url": "https://autoscout24.de/listing/999",
    }
    return [sample_listing_data, second, minimal]


@pytest.fixture
def sample_listing(sample_listing_data) -> Listing:
    return Listing(**sample_listing_data)


@pytest.fixture
def make_listing(sample_listing_data):
    """Factory building a Listing from the sample row with overrides."""
    def _make(**overrides) -> Listing:
        return Listing(**{**sample_listing_data, **overrides})
    return _make


@pytest.fixture
def fake_source(sample_rows):
    """ListingSource stand-in whose fetch() returns the sample rows."""
    source = MagicMock(spec=ListingSource)
    source.fetch.return_value = sample_rows
    return source


@pytest.fixture
def listing_store(fake_source, clock) -> ListingStore:
    return ListingStore(fake_source, clock=clock)
