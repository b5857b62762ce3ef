"""Configuration package exports.

Base URL resolution plus the environment-backed settings model.
"""

from .base_url import absolutize_base_url, is_relative, resolve_api_base_url
from .settings import ClientSettings

__all__ = [
    "ClientSettings",
    "absolutize_base_url",
    "is_relative",
    "resolve_api_base_url",
]
