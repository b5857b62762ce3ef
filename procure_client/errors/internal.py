"""Centralized client error hierarchy.

Raw aiohttp / JSON errors never reach callers directly; the transport wraps
them into one of these categories so pages can tell a dropped connection
from a rejected form or an ended session.

Classes:
  InternalError        – Base for all client errors.
  NetworkError         – Transport/IO failure or timeout, no HTTP status.
  ParsingError         – Response body could not be decoded.
  ConfigurationError   – Invalid settings detected at startup.
  ApiError             – The API answered with an HTTP error status.
  SessionExpiredError  – The session refresh failed; re-authentication needed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class InternalError(Exception):
    """Base class for all client errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    Connection resets, DNS failures and timeouts end up here. The client
    never retries these on its own.
    """


class ParsingError(InternalError):
    """Exception raised when a response body cannot be decoded."""


class ConfigurationError(InternalError):
    """Exception raised for invalid client settings."""


class ApiError(InternalError):
    """The API answered with a status of 400 or above.

    Attributes:
        status: HTTP status code of the response, None when unknown.
        payload: Decoded response body (dict, list, str or None).
        method: HTTP method of the failed call.
        url: Absolute URL of the failed call.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None,
        payload: Any = None,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(
            message,
            data={"status": status, "method": method, "url": url},
        )
        self.status = status
        self.payload = payload
        self.method = method
        self.url = url

    @property
    def is_unauthorized(self) -> bool:
        return self.status == 401

    @property
    def detail(self) -> str | None:
        """Server supplied ``detail`` message, if the body carries one."""
        if isinstance(self.payload, Mapping):
            detail = self.payload.get("detail")
            if isinstance(detail, str):
                return detail
        return None


class SessionExpiredError(ApiError):
    """Raised to the triggering call and every queued call when a refresh fails.

    ``status`` is the refresh response status, or None when the refresh
    never got an HTTP answer.
    """


__all__ = [
    "InternalError",
    "NetworkError",
    "ParsingError",
    "ConfigurationError",
    "ApiError",
    "SessionExpiredError",
]
