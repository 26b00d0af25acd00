"""Tests for the Supabase listing source (no network calls)."""

from unittest.mock import MagicMock

import pytest
import requests

from listing_tracker.common.config import QuerySettings, Settings
from listing_tracker.common.http_client import HTTPClient
from listing_tracker.listings.models import ListingFetchError
from listing_tracker.listings.source import ListingSource


@pytest.fixture
def http_client():
    client = MagicMock(spec=HTTPClient)
    response = MagicMock()
    response.json.return_value = []
    client.get.return_value = response
    return client


@pytest.fixture
def source(http_client, test_settings) -> ListingSource:
    return ListingSource(
        supabase_url="https://test.supabase.co",
        supabase_key="anon-key",
        http_client=http_client,
        settings=test_settings,
    )


class TestRequestShape:
    def test_endpoint(self, source):
        assert source.endpoint == "https://test.supabase.co/rest/v1/listings"

    def test_endpoint_strips_trailing_slash(self, http_client, test_settings):
        source = ListingSource("https://test.supabase.co/", "k", http_client, test_settings)
        assert "supabase.co//rest" not in source.endpoint

    def test_query_params(self, source):
        assert source.build_params() == {
            "status": "eq.active",
            "transmission": "eq.manual",
            "order": "investment_score.desc",
            "limit": "50",
        }

    def test_ascending_order_from_settings(self, http_client):
        settings = Settings(query=QuerySettings(descending=False, limit=5))
        source = ListingSource("https://t.supabase.co", "k", http_client, settings)
        params = source.build_params()
        assert params["order"] == "investment_score.asc"
        assert params["limit"] == "5"

    def test_headers(self, source):
        assert source.build_headers() == {
            "apikey": "anon-key",
            "Authorization": "Bearer anon-key",
            "Content-Type": "application/json",
        }

    def test_fetch_sends_query(self, source, http_client):
        source.fetch()
        http_client.get.assert_called_once_with(
            "https://test.supabase.co/rest/v1/listings",
            params=source.build_params(),
            headers=source.build_headers(),
        )


class TestFetch:
    def test_returns_rows(self, source, http_client, sample_rows):
        http_client.get.return_value.json.return_value = sample_rows
        assert source.fetch() == sample_rows

    def test_non_array_payload_raises(self, source, http_client):
        http_client.get.return_value.json.return_value = {"message": "permission denied"}
        with pytest.raises(ListingFetchError, match="JSON array"):
            source.fetch()

    def test_http_error_propagates(self, source, http_client):
        http_client.get.side_effect = requests.HTTPError("500 Server Error")
        with pytest.raises(requests.HTTPError):
            source.fetch()

    def test_missing_credentials_warns_once(self, http_client, test_settings, caplog):
        source = ListingSource("", "", http_client, test_settings)
        with caplog.at_level("WARNING"):
            source.fetch()
            source.fetch()
        warnings = [r for r in caplog.records if "SUPABASE_URL" in r.getMessage()]
        assert len(warnings) == 1

    def test_credentials_from_env(self, monkeypatch, http_client, test_settings):
        monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
        source = ListingSource(http_client=http_client, settings=test_settings)
        assert source.endpoint.startswith("https://env.supabase.co/")
        assert source.build_headers()["apikey"] == "env-key"

    def test_close_closes_http_client(self, source, http_client):
        with source:
            pass
        http_client.close.assert_called_once()
