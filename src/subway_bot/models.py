from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .codes import ArrivalCode, SubwayLine

UNKNOWN_STATUS = "알 수 없음"
PREVIOUS_STATION_PLACEHOLDER = "전역"

# Codes 3-5 describe progress toward the queried station, so it is shown as "next".
_LOCATION_TEMPLATES = {
    ArrivalCode.ENTERING: "{station}역 진입 중",
    ArrivalCode.ARRIVED: "{station}역 도착",
    ArrivalCode.DEPARTED: "{station}역 출발",
    ArrivalCode.PREV_DEPARTED: "전역 출발 (다음: {station}역)",
    ArrivalCode.PREV_ENTERING: "전역 진입 중 (다음: {station}역)",
    ArrivalCode.PREV_ARRIVED: "{previous} 도착 (다음: {station}역)",
    ArrivalCode.RUNNING: "{destination}역 방향 운행 중",
}


@dataclass(frozen=True)
class SubwayArrival:
    """One train's real-time position relative to a queried station.

    Only the line, current station, train number and arrival order key take
    part in equality and hashing: the endpoint resends refreshed timers for
    the same arrival event. Every field is kept as the raw text sent by the
    endpoint; ``received_timestamp`` is passed through without clock-skew
    correction.
    """

    subway_line_id: str = ""
    current_station_id: str = ""
    train_number: str = ""
    arrival_order_key: str = ""

    up_down_line: str = field(default="", compare=False)
    train_line_name: str = field(default="", compare=False)
    previous_station_id: str = field(default="", compare=False)
    next_station_id: str = field(default="", compare=False)
    station_name: str = field(default="", compare=False)
    transfer_line_count: str = field(default="", compare=False)
    connected_subway_line_ids: str = field(default="", compare=False)
    connected_station_ids: str = field(default="", compare=False)
    train_status: str = field(default="", compare=False)
    arrival_seconds: str = field(default="", compare=False)
    final_destination_station_id: str = field(default="", compare=False)
    final_destination_station_name: str = field(default="", compare=False)
    received_timestamp: str = field(default="", compare=False)
    first_arrival_message: str = field(default="", compare=False)
    second_arrival_message: str = field(default="", compare=False)
    arrival_status_code: str = field(default="", compare=False)
    last_train_flag: str = field(default="", compare=False)

    @property
    def arrival_minutes(self) -> int:
        """Minutes until arrival, rounded up; 0 when the countdown is unusable."""

        try:
            seconds = int(self.arrival_seconds)
        except ValueError:
            return 0
        if seconds <= 0:
            return 0
        return math.ceil(seconds / 60)

    @property
    def is_last_train(self) -> bool:
        return self.last_train_flag == "1"

    @property
    def arrival_code(self) -> Optional[ArrivalCode]:
        return ArrivalCode.from_code(self.arrival_status_code)

    @property
    def subway_line(self) -> Optional[SubwayLine]:
        return SubwayLine.from_id(self.subway_line_id)

    @property
    def location_status(self) -> str:
        """Human readable description of where the train is right now."""

        code = self.arrival_code
        if code is None:
            return UNKNOWN_STATUS
        return _LOCATION_TEMPLATES[code].format(
            station=self.station_name,
            previous=self.second_arrival_message or PREVIOUS_STATION_PLACEHOLDER,
            destination=self.final_destination_station_name,
        )
