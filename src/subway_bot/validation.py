from __future__ import annotations

from typing import Optional

from .errors import InvalidArgument

MAX_PAGE_SPAN = 1000


def validate_station_name(station_name: Optional[str]) -> None:
    if station_name is None or not station_name.strip():
        raise InvalidArgument("Station name must not be empty")


def validate_pagination(start_index: int, end_index: int) -> None:
    """Check the requested result window against the endpoint's page limits."""

    if start_index < 0:
        raise InvalidArgument(f"start_index must be non-negative, got {start_index}")
    if end_index < start_index:
        raise InvalidArgument(
            f"end_index ({end_index}) must be greater than or equal to start_index ({start_index})"
        )
    if end_index - start_index > MAX_PAGE_SPAN:
        raise InvalidArgument(
            f"end_index ({end_index}) requests more than {MAX_PAGE_SPAN} results "
            f"after start_index ({start_index})"
        )
