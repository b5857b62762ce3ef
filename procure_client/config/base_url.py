"""API base URL resolution.

A relative base only makes sense next to a dev server that proxies ``/api``.
Once deployed, the static front and the API live on different origins, so a
relative path would resolve against the static host instead of the API.
"""

from __future__ import annotations

from urllib.parse import urljoin, urlparse

from ..constants import DEFAULT_PROD_API, DEFAULT_RELATIVE_BASE


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def is_relative(value: str) -> bool:
    return value.startswith("/")


def resolve_api_base_url(
    override: str | None,
    *,
    is_dev: bool,
    fallback: str | None = DEFAULT_PROD_API,
    origin: str | None = None,
) -> str:
    """Pick the API base URL following the deployment priority order.

    Args:
        override: Explicit base URL from configuration, if any.
        is_dev: True in a development context.
        fallback: Production API URL used when no usable override exists.
        origin: Origin of the page hosting the client, if known.

    Returns:
        The resolved base URL, absolute or relative.

    Example:
        >>> resolve_api_base_url("/api", is_dev=False, fallback="https://api.example.org/api")
        'https://api.example.org/api'
    """
    override = _clean(override)
    fallback = _clean(fallback)
    origin = _clean(origin)

    if override:
        if is_dev or not is_relative(override):
            return override
        if fallback:
            return fallback
    elif is_dev:
        return DEFAULT_RELATIVE_BASE

    if fallback:
        return fallback
    if origin:
        return f"{origin.rstrip('/')}{DEFAULT_RELATIVE_BASE}"
    return DEFAULT_RELATIVE_BASE


def absolutize_base_url(base_url: str, origin: str) -> str:
    """Join a relative base onto ``origin``; absolute bases pass through."""
    if not is_relative(base_url):
        return base_url
    return urljoin(origin.rstrip("/") + "/", base_url.lstrip("/"))


def is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
