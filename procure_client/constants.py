"""
Configuration constants for the procurement API client

This module contains the fixed endpoint paths and tunables used throughout the
client. Numeric tunables can be overridden by setting an environment variable
with the same name.
"""

import os


def _get_env_float(name: str, default: float) -> float:
    """Retrieve a float value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default float value to return if parsing fails.

    Returns:
        The parsed float value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}"
            )
    return default


# Base URL resolution
DEFAULT_RELATIVE_BASE = "/api"
DEFAULT_PROD_API = "https://simplonservices.onrender.com/api"
DEFAULT_DEV_ORIGIN = "http://localhost:8000"  # Django dev server behind /api

# Session endpoints
LOGIN_ENDPOINT = "/auth/login/"
REFRESH_ENDPOINT = "/auth/refresh/"
LOGOUT_ENDPOINT = "/auth/logout/"

# A 401 from any of these is final; refreshing would loop on itself
EXCLUDED_REFRESH_ENDPOINTS = (LOGIN_ENDPOINT, REFRESH_ENDPOINT, LOGOUT_ENDPOINT)

SESSION_COOKIE_NAME = "access_token"

# HTTP behaviour
REQUEST_TIMEOUT_SECONDS = _get_env_float(
    "REQUEST_TIMEOUT_SECONDS", 30.0
)  # Total timeout applied by the transport to every call
