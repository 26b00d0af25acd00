"""HTTP client with retry and exponential backoff for REST reads."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from .config import HTTPSettings, settings

logger = logging.getLogger(__name__)

# Client errors that are worth another attempt
RETRYABLE_CLIENT_STATUSES = {408, 429}

# Requests that can never succeed as addressed
NON_RETRYABLE_URL_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


class HTTPClient:
    """HTTP client wrapping a requests session.

    Features:
    - Automatic retries with exponential backoff
    - No retry on permanent 4xx failures or malformed URLs
    """

    def __init__(self, config: HTTPSettings | None = None) -> None:
        self.config = config or settings.http
        self._session = requests.Session()

    def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> requests.Response:
        """Send a GET request with retries.

        Args:
            url: Target URL.
            params: Query parameters.
            headers: Request headers.

        Returns:
            requests.Response object with a 2xx status.

        Raises:
            requests.RequestException: After all retries exhausted, or
                immediately on a non-retryable 4xx response or a URL
                that cannot be requested.
        """
        max_attempts = self.config.max_retries + 1
        last_exc: Exception | None = None
        for attempt in range(max_attempts):
            try:
                resp = self._session.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.config.request_timeout,
                )
                resp.raise_for_status()
                return resp

            except NON_RETRYABLE_URL_ERRORS as exc:
                logger.warning("Request failed (bad URL, no retry): %s", exc)
                raise

            except requests.RequestException as exc:
                last_exc = exc

                if (
                    isinstance(exc, requests.HTTPError)
                    and exc.response is not None
                    and 400 <= exc.response.status_code < 500
                    and exc.response.status_code not in RETRYABLE_CLIENT_STATUSES
                ):
                    logger.warning("Request failed (4xx, no retry): %s", exc)
                    raise

                if attempt + 1 >= max_attempts:
                    break

                wait_time = self.config.backoff_base ** attempt
                logger.warning(
                    "Request failed (attempt %d/%d): %s, retrying in %.1fs",
                    attempt + 1,
                    max_attempts,
                    exc,
                    wait_time,
                )
                time.sleep(wait_time)

        raise last_exc  # type: ignore[misc]

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
