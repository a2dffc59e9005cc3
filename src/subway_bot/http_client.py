from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import SeoulApiSettings
from .errors import NetworkError

logger = logging.getLogger(__name__)


class HttpClient:
    """Blocking GET client with independent connect and read timeouts.

    Every transport failure is raised as :class:`NetworkError`; nothing is
    retried or cached. The underlying ``httpx.Client`` is thread-safe, so one
    instance can serve concurrent callers.
    """

    def __init__(
        self,
        settings: SeoulApiSettings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self.timeout = httpx.Timeout(settings.read_timeout, connect=settings.connect_timeout)
        self._client = httpx.Client(
            timeout=self.timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )
        logger.debug(
            "HttpClient initialised with connect_timeout=%ss, read_timeout=%ss",
            settings.connect_timeout,
            settings.read_timeout,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":  # pragma: no cover - convenience
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - convenience
        self.close()

    def get(self, url: str) -> str:
        """Send one GET request and return the response body as text."""

        safe_url = self._redact(url)
        logger.debug("Sending GET request to %s", safe_url)

        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            logger.error("Request to %s timed out: %s", safe_url, exc)
            raise NetworkError(f"Request timed out: {exc}", url=url) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Network error while requesting %s: %s", safe_url, exc)
            raise NetworkError(f"Network error: {exc}", url=url) from exc

        logger.debug(
            "Received response status=%s, length=%s bytes",
            response.status_code,
            len(response.content),
        )
        if not response.is_success:
            raise NetworkError(
                f"HTTP request failed with status={response.status_code}: {safe_url}",
                status_code=response.status_code,
                url=url,
            )
        return response.text

    def _redact(self, url: str) -> str:
        return url.replace(self._settings.api_key, "***")
