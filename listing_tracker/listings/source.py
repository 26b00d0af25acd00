"""Supabase source — Read ranked listings through the PostgREST API.

Usage:
    source = ListingSource()
    rows = source.fetch()  # raw JSON records, best investment score first
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from listing_tracker.common.config import (
    QuerySettings,
    Settings,
    get_supabase_key,
    get_supabase_url,
    settings as default_settings,
)
from listing_tracker.common.http_client import HTTPClient

from .models import ListingFetchError

logger = logging.getLogger(__name__)


class ListingSource:
    """Fetch listing rows from the remote listings table.

    Credentials come from SUPABASE_URL / SUPABASE_ANON_KEY unless passed
    explicitly. Missing credentials are not an error here: the request is
    still issued, fails, and the caller falls back to sample data.
    """

    def __init__(
        self,
        supabase_url: Optional[str] = None,
        supabase_key: Optional[str] = None,
        http_client: Optional[HTTPClient] = None,
        settings: Optional[Settings] = None,
    ):
        self._settings = settings or default_settings
        self._url = supabase_url if supabase_url is not None else get_supabase_url()
        self._key = supabase_key if supabase_key is not None else get_supabase_key()
        self._http = http_client or HTTPClient(self._settings.http)
        self._warned_missing = False

    @property
    def endpoint(self) -> str:
        """Full URL of the listings table."""
        base = self._url.rstrip("/")
        rest_path = "/" + self._settings.supabase.rest_path.strip("/")
        return f"{base}{rest_path}/{self._settings.supabase.table}"

    def build_params(self) -> dict[str, str]:
        """PostgREST query parameters for the configured filter."""
        query: QuerySettings = self._settings.query
        direction = "desc" if query.descending else "asc"
        return {
            "status": f"eq.{query.status}",
            "transmission": f"eq.{query.transmission}",
            "order": f"{query.order_by}.{direction}",
            "limit": str(query.limit),
        }

    def build_headers(self) -> dict[str, str]:
        return {
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Content-Type": "application/json",
        }

    def fetch(self) -> list[dict[str, Any]]:
        """Issue the listings query and return the decoded record array.

        Raises:
            requests.RequestException: Transport failure, non-2xx status,
                or an undecodable body.
            ListingFetchError: The body decoded to something other than
                an array.
        """
        if not (self._url and self._key) and not self._warned_missing:
            logger.warning(
                "SUPABASE_URL / SUPABASE_ANON_KEY not set; listing requests will fail"
            )
            self._warned_missing = True

        response = self._http.get(
            self.endpoint,
            params=self.build_params(),
            headers=self.build_headers(),
        )
        data = response.json()
        if not isinstance(data, list):
            raise ListingFetchError(
                f"Expected a JSON array of listings, got {type(data).__name__}"
            )
        logger.debug("Fetched %d listing rows from %s", len(data), self.endpoint)
        return data

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._http.close()

    def __enter__(self) -> ListingSource:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
