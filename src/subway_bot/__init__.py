"""Seoul subway real-time arrival client and Telegram bot."""

__version__ = "0.1.0"

from .codes import ArrivalCode, SubwayLine
from .config import BotSettings, SeoulApiSettings
from .errors import (
    ApiError,
    AuthenticationError,
    InvalidArgument,
    NetworkError,
    SubwayApiError,
)
from .models import SubwayArrival
from .subway_api import SubwayClient

__all__ = [
    "SubwayClient",
    "SubwayArrival",
    "ArrivalCode",
    "SubwayLine",
    "SeoulApiSettings",
    "BotSettings",
    "SubwayApiError",
    "InvalidArgument",
    "NetworkError",
    "ApiError",
    "AuthenticationError",
]
