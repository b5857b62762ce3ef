from __future__ import annotations

import aiohttp

from ..logging_config import log_structured_error
from .internal import (
    ApiError,
    ConfigurationError,
    InternalError,
    NetworkError,
    ParsingError,
    SessionExpiredError,
)


def categorize_error(error: BaseException) -> str:
    """Map an exception to the category used by structured logging."""
    if isinstance(error, SessionExpiredError):
        return "session"
    if isinstance(error, ApiError):
        if error.status in (401, 403):
            return "auth"
        if error.status is not None and error.status >= 500:
            return "server"
        return "client"
    if isinstance(error, NetworkError | OSError | ConnectionError | TimeoutError):
        return "network"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, ConfigurationError):
        return "config"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict = None) -> None:
    """Logs an error message with the associated exception details.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    error_context = dict(context or {})
    if isinstance(error, ApiError) and error.status is not None:
        error_context.setdefault("http_status", error.status)
    log_structured_error(
        error_type=categorize_error(error),
        message=f"{message}: {str(error)}",
        exception=error,
        context=error_context or None,
    )


def wrap_transport_error(error: Exception, method: str, url: str) -> InternalError:
    """Translate an aiohttp/timeout failure into a NetworkError.

    The returned exception is meant to be raised ``from`` the original.
    """
    if isinstance(error, TimeoutError):
        return NetworkError(
            f"Timed out during {method} {url}",
            data={"method": method, "url": url},
        )
    if isinstance(error, aiohttp.ClientResponseError):
        # Raised by aiohttp itself (e.g. malformed headers), not by our status check
        return ApiError(
            f"HTTP {error.status} during {method} {url}: {error.message}",
            status=error.status,
            method=method,
            url=url,
        )
    return NetworkError(
        f"Network connectivity issue during {method} {url}. Check the API base URL "
        f"and DNS resolution. Error: {str(error)}",
        data={"method": method, "url": url},
    )
