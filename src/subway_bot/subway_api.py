from __future__ import annotations

import logging
from typing import Optional

import httpx

from .config import SeoulApiSettings
from .decoder import decode_arrivals
from .http_client import HttpClient
from .models import SubwayArrival
from .query import build_arrival_url
from .validation import validate_pagination, validate_station_name

logger = logging.getLogger(__name__)

DEFAULT_START_INDEX = 0
DEFAULT_END_INDEX = 100


class SubwayClient:
    """Client for the Seoul Open Data real-time station arrival API."""

    def __init__(
        self,
        settings: SeoulApiSettings,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings
        self._http = HttpClient(settings, transport=transport)

    @property
    def settings(self) -> SeoulApiSettings:
        return self._settings

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SubwayClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_realtime_arrival(
        self,
        station_name: str,
        start_index: int = DEFAULT_START_INDEX,
        end_index: int = DEFAULT_END_INDEX,
    ) -> list[SubwayArrival]:
        """Return upcoming trains for a station, in the order the endpoint ranks them.

        ``station_name`` is the Korean station name as the endpoint knows it
        (e.g. ``"강남"``). Raises ``InvalidArgument`` before any request for a
        blank name or a bad result window, ``NetworkError`` for transport
        failures and ``ApiError`` for endpoint-reported or malformed responses.
        """

        validate_station_name(station_name)
        validate_pagination(start_index, end_index)

        url = build_arrival_url(
            self._settings.base_url,
            self._settings.api_key,
            station_name,
            start_index,
            end_index,
        )
        body = self._http.get(url)
        arrivals = decode_arrivals(body)
        logger.info("Fetched %d arrivals for station '%s'", len(arrivals), station_name)
        return arrivals


def create_subway_client(settings: SeoulApiSettings) -> SubwayClient:
    """Factory helper to create an arrival API client."""

    return SubwayClient(settings)
