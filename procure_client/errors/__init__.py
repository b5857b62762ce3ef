"""Error hierarchy and logging helpers for client failures."""

from .handling import categorize_error, log_error, wrap_transport_error
from .internal import (
    ApiError,
    ConfigurationError,
    InternalError,
    NetworkError,
    ParsingError,
    SessionExpiredError,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "InternalError",
    "NetworkError",
    "ParsingError",
    "SessionExpiredError",
    "categorize_error",
    "log_error",
    "wrap_transport_error",
]
