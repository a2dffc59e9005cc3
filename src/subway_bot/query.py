from __future__ import annotations

from urllib.parse import quote

from .errors import ApiError

SERVICE_NAME = "realtimeStationArrival"
RESPONSE_FORMAT = "json"


def build_arrival_url(
    base_url: str,
    api_key: str,
    station_name: str,
    start_index: int,
    end_index: int,
) -> str:
    """Return the arrival lookup URL for an already validated request.

    The station name is percent-encoded from its UTF-8 bytes with no safe
    characters, so Hangul names and names containing ``/`` stay in one path
    segment.
    """

    try:
        encoded_station = quote(station_name, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise ApiError(f"Failed to encode station name {station_name!r}: {exc}") from exc

    return "/".join(
        [
            base_url.rstrip("/"),
            api_key,
            RESPONSE_FORMAT,
            SERVICE_NAME,
            str(start_index),
            str(end_index),
            encoded_station,
        ]
    )
