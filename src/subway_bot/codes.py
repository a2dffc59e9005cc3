from __future__ import annotations

from enum import Enum
from typing import Optional


class ArrivalCode(Enum):
    """Stage of a train's approach relative to the queried station (``arvlCd``)."""

    ENTERING = (0, "진입")
    ARRIVED = (1, "도착")
    DEPARTED = (2, "출발")
    PREV_DEPARTED = (3, "전역출발")
    PREV_ENTERING = (4, "전역진입")
    PREV_ARRIVED = (5, "전역도착")
    RUNNING = (99, "운행중")

    def __init__(self, code: int, description: str) -> None:
        self.code = code
        self.description = description

    @classmethod
    def from_code(cls, code: int | str | None) -> Optional["ArrivalCode"]:
        """Return the member for a numeric or text code, or ``None`` if unknown."""

        try:
            value = int(code)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        for member in cls:
            if member.code == value:
                return member
        return None

    def __str__(self) -> str:
        return f"{self.description} ({self.code})"


class SubwayLine(Enum):
    """Lines served by the Seoul real-time arrival API, keyed by ``subwayId``."""

    LINE_1 = (1001, "1호선")
    LINE_2 = (1002, "2호선")
    LINE_3 = (1003, "3호선")
    LINE_4 = (1004, "4호선")
    LINE_5 = (1005, "5호선")
    LINE_6 = (1006, "6호선")
    LINE_7 = (1007, "7호선")
    LINE_8 = (1008, "8호선")
    LINE_9 = (1009, "9호선")
    GTX_A = (1032, "GTX-A")
    JUNGANG = (1061, "중앙선")
    GYEONGUI_JUNGANG = (1063, "경의중앙선")
    AIRPORT = (1065, "공항철도")
    GYEONGCHUN = (1067, "경춘선")
    SUIN_BUNDANG = (1075, "수인분당선")
    SINBUNDANG = (1077, "신분당선")
    GYEONGGANG = (1081, "경강선")
    UI_SINSEOL = (1092, "우이신설선")
    SEOHAE = (1093, "서해선")

    def __init__(self, line_id: int, display_name: str) -> None:
        self.line_id = line_id
        self.display_name = display_name

    @classmethod
    def from_id(cls, line_id: int | str | None) -> Optional["SubwayLine"]:
        try:
            value = int(line_id)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        for member in cls:
            if member.line_id == value:
                return member
        return None

    def __str__(self) -> str:
        return f"{self.display_name} ({self.line_id})"
