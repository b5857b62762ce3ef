from __future__ import annotations

import pytest

from procure_client.config.base_url import absolutize_base_url, resolve_api_base_url
from procure_client.constants import DEFAULT_PROD_API

FALLBACK = "https://prod.example.org/api"
ORIGIN = "https://app.example.org"
ABSOLUTE = "https://api.custom.io/v1"
RELATIVE = "/backend"


@pytest.mark.parametrize(
    ("override", "is_dev", "fallback", "origin", "expected"),
    [
        # no override
        (None, True, FALLBACK, ORIGIN, "/api"),
        (None, True, None, None, "/api"),
        (None, False, FALLBACK, ORIGIN, FALLBACK),
        (None, False, FALLBACK, None, FALLBACK),
        (None, False, None, ORIGIN, "https://app.example.org/api"),
        (None, False, None, None, "/api"),
        # absolute override always wins
        (ABSOLUTE, True, FALLBACK, ORIGIN, ABSOLUTE),
        (ABSOLUTE, True, None, None, ABSOLUTE),
        (ABSOLUTE, False, FALLBACK, ORIGIN, ABSOLUTE),
        (ABSOLUTE, False, None, None, ABSOLUTE),
        # relative override only honoured in development
        (RELATIVE, True, FALLBACK, ORIGIN, RELATIVE),
        (RELATIVE, True, None, None, RELATIVE),
        (RELATIVE, False, FALLBACK, ORIGIN, FALLBACK),
        (RELATIVE, False, FALLBACK, None, FALLBACK),
        (RELATIVE, False, None, ORIGIN, "https://app.example.org/api"),
        (RELATIVE, False, None, None, "/api"),
    ],
)
def test_resolution_priority(override, is_dev, fallback, origin, expected):
    assert (
        resolve_api_base_url(override, is_dev=is_dev, fallback=fallback, origin=origin)
        == expected
    )


def test_blank_values_count_as_absent():
    assert resolve_api_base_url("   ", is_dev=False, fallback=FALLBACK) == FALLBACK
    assert resolve_api_base_url(None, is_dev=False, fallback="  ", origin=ORIGIN + "/") == (
        "https://app.example.org/api"
    )


def test_override_is_trimmed():
    assert resolve_api_base_url(f"  {ABSOLUTE}  ", is_dev=False) == ABSOLUTE


def test_default_fallback_is_production_api():
    assert resolve_api_base_url(None, is_dev=False) == DEFAULT_PROD_API


def test_absolutize_relative_base():
    assert absolutize_base_url("/api", "http://localhost:8000") == "http://localhost:8000/api"
    assert absolutize_base_url("/api", "http://localhost:8000/") == "http://localhost:8000/api"
    assert absolutize_base_url(ABSOLUTE, "http://localhost:8000") == ABSOLUTE
