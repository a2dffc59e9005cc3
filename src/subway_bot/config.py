from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Self

from .errors import InvalidArgument

DEFAULT_BASE_URL = "http://swopenAPI.seoul.go.kr/api/subway"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class SeoulApiSettings:
    """Credentials and HTTP timeouts for the Seoul real-time arrival API."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    connect_timeout: float = DEFAULT_TIMEOUT_SECONDS
    read_timeout: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise InvalidArgument("API key is required. Obtain one from https://data.seoul.go.kr")
        if not self.base_url:
            raise InvalidArgument("base_url must not be empty")
        _require_positive(self.connect_timeout, "connect_timeout")
        _require_positive(self.read_timeout, "read_timeout")

    def __repr__(self) -> str:
        masked_key = "***" + self.api_key[-4:]
        return (
            f"SeoulApiSettings(api_key={masked_key!r}, base_url={self.base_url!r}, "
            f"connect_timeout={self.connect_timeout}, read_timeout={self.read_timeout})"
        )

    @classmethod
    def from_env_optional(cls) -> Optional[Self]:
        api_key = os.environ.get("SEOUL_API_KEY")
        if not api_key:
            return None

        base_url = os.environ.get("SEOUL_API_BASE_URL", DEFAULT_BASE_URL)
        connect_timeout = float(
            os.environ.get("SEOUL_API_CONNECT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
        )
        read_timeout = float(os.environ.get("SEOUL_API_READ_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
        return cls(
            api_key=api_key,
            base_url=base_url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )


@dataclass(frozen=True)
class BotSettings:
    """Configuration options for the Telegram bot."""

    telegram_token: str
    api_settings: SeoulApiSettings
    default_result_limit: int = 5

    @classmethod
    def from_env(cls) -> Self:
        """Create settings object from environment variables."""

        try:
            telegram_token = os.environ["TELEGRAM_BOT_TOKEN"]
        except KeyError as exc:  # pragma: no cover - trivial
            missing = exc.args[0]
            raise RuntimeError(
                f"Missing Telegram credential in environment: {missing}"
            ) from None

        api_settings = SeoulApiSettings.from_env_optional()
        if not api_settings:
            raise RuntimeError("SEOUL_API_KEY must be set to query arrivals.")

        limit = int(os.environ.get("DEFAULT_RESULT_LIMIT", 5))
        return cls(
            telegram_token=telegram_token,
            api_settings=api_settings,
            default_result_limit=limit,
        )


def _require_positive(value: float, name: str) -> None:
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
