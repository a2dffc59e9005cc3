"""Decode ``realtimeStationArrival`` JSON payloads into :class:`SubwayArrival` records."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from .errors import ApiError, AuthenticationError
from .models import SubwayArrival

logger = logging.getLogger(__name__)

SUCCESS_CODE = "INFO-000"
INVALID_KEY_CODE = "INFO-100"
ARRIVAL_LIST_KEY = "realtimeArrivalList"
ERROR_ENVELOPE_KEY = "errorMessage"

# (wire key, SubwayArrival attribute)
FIELD_MAP: tuple[tuple[str, str], ...] = (
    ("subwayId", "subway_line_id"),
    ("updnLine", "up_down_line"),
    ("trainLineNm", "train_line_name"),
    ("statnFid", "previous_station_id"),
    ("statnTid", "next_station_id"),
    ("statnId", "current_station_id"),
    ("statnNm", "station_name"),
    ("trnsitCo", "transfer_line_count"),
    ("ordkey", "arrival_order_key"),
    ("subwayList", "connected_subway_line_ids"),
    ("statnList", "connected_station_ids"),
    ("btrainSttus", "train_status"),
    ("barvlDt", "arrival_seconds"),
    ("btrainNo", "train_number"),
    ("bstatnId", "final_destination_station_id"),
    ("bstatnNm", "final_destination_station_name"),
    ("recptnDt", "received_timestamp"),
    ("arvlMsg2", "first_arrival_message"),
    ("arvlMsg3", "second_arrival_message"),
    ("arvlCd", "arrival_status_code"),
    ("lstcarAt", "last_train_flag"),
)


def decode_arrivals(body: str) -> list[SubwayArrival]:
    """Turn a raw response body into arrival records, in the order sent.

    Raises :class:`ApiError` for malformed payloads and for any status
    envelope other than the success code. A payload without an arrival list
    decodes to an empty list.
    """

    try:
        payload = _load(body)
        _check_envelope(payload)

        if ARRIVAL_LIST_KEY not in payload:
            logger.warning("No %s in response, returning empty list", ARRIVAL_LIST_KEY)
            return []

        items = payload[ARRIVAL_LIST_KEY] or []
        if not isinstance(items, list):
            raise ApiError(f"Malformed response: {ARRIVAL_LIST_KEY} is not an array")
        return [map_arrival(item) for item in items]
    except ApiError:
        raise
    except Exception as exc:
        logger.error("Failed to decode arrival response: %s", exc)
        raise ApiError(f"Failed to parse JSON response: {exc}") from exc


def map_arrival(item: Mapping[str, Any]) -> SubwayArrival:
    """Build one record from a single element of the arrival list."""

    if not isinstance(item, Mapping):
        raise ApiError(f"Malformed response: arrival entry is {type(item).__name__}, not an object")
    return SubwayArrival(**{attr: _text(item.get(key)) for key, attr in FIELD_MAP})


def _load(body: str) -> dict[str, Any]:
    try:
        payload = json.loads(body)
    except ValueError as exc:
        snippet = (body or "")[:200] or "<empty body>"
        raise ApiError(f"Malformed response: {exc}: {snippet}") from exc
    if not isinstance(payload, dict):
        raise ApiError(f"Malformed response: expected a JSON object, got {type(payload).__name__}")
    return payload


def _check_envelope(payload: Mapping[str, Any]) -> None:
    envelope = _find_envelope(payload)
    if envelope is None:
        return

    code = _text(envelope.get("code"))
    message = _text(envelope.get("message"))
    if code == SUCCESS_CODE:
        logger.debug("API response: code=%s, message=%s", code, message)
        return

    logger.error("API error code=%s, message=%s", code, message)
    if code == INVALID_KEY_CODE:
        raise AuthenticationError(message, error_code=code)
    raise ApiError(message, error_code=code)


def _find_envelope(payload: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    envelope = payload.get(ERROR_ENVELOPE_KEY)
    if isinstance(envelope, Mapping):
        return envelope
    # Without any data to wrap, the endpoint sends the status fields at the top level.
    if "code" in payload and "message" in payload:
        return payload
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return ""
    return str(value)
