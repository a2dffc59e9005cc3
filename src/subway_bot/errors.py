from __future__ import annotations

from typing import Optional


class SubwayApiError(RuntimeError):
    """Base class for every failure raised while querying the arrival API."""


class InvalidArgument(SubwayApiError, ValueError):
    """Raised when a request is rejected before any network activity."""


class NetworkError(SubwayApiError):
    """Raised when the HTTP exchange itself fails or returns a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ApiError(SubwayApiError):
    """Raised when the endpoint reports an error or returns an unusable payload."""

    def __init__(self, message: str, *, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class AuthenticationError(ApiError):
    """Raised when the endpoint rejects the API key."""
