from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..constants import (
    DEFAULT_DEV_ORIGIN,
    DEFAULT_PROD_API,
    REQUEST_TIMEOUT_SECONDS,
    SESSION_COOKIE_NAME,
)
from ..errors.internal import ConfigurationError
from .base_url import absolutize_base_url, is_absolute_http_url, resolve_api_base_url

_DEV_ENV_NAMES = {"dev", "development", "local"}


class ClientSettings(BaseModel):
    """Settings for one API client, normally read from the environment.

    Attributes:
        api_base_url_override: Explicit API base URL (``PROCURE_API_BASE_URL``).
        default_prod_api: Production fallback URL (``PROCURE_DEFAULT_PROD_API``).
        environment: ``development`` or ``production`` (``PROCURE_ENV``).
        page_origin: Origin relative bases resolve against (``PROCURE_PAGE_ORIGIN``).
        request_timeout: Total per-request timeout in seconds (``PROCURE_REQUEST_TIMEOUT``).
        session_cookie_name: Cookie checked by the session presence helper
            (``PROCURE_SESSION_COOKIE``).
    """

    api_base_url_override: str | None = None
    default_prod_api: str | None = DEFAULT_PROD_API
    environment: str = "production"
    page_origin: str | None = None
    request_timeout: float = Field(default=REQUEST_TIMEOUT_SECONDS, gt=0)
    session_cookie_name: str = Field(default=SESSION_COOKIE_NAME, min_length=1)

    @field_validator("api_base_url_override", "page_origin", mode="before")
    @classmethod
    def strip_blank(cls, v: object) -> object:
        """Treat blank strings as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("default_prod_api", mode="before")
    @classmethod
    def default_blank_fallback(cls, v: object) -> object:
        """A blank production URL means the built-in one."""
        if isinstance(v, str):
            return v.strip() or DEFAULT_PROD_API
        return v

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: object) -> str:
        if not isinstance(v, str) or not v.strip():
            return "production"
        return v.strip().lower()

    @field_validator("page_origin")
    @classmethod
    def validate_origin(cls, v: str | None) -> str | None:
        if v is not None and not is_absolute_http_url(v):
            raise ValueError("page_origin must be an absolute http(s) URL")
        return v

    @property
    def is_dev(self) -> bool:
        return self.environment in _DEV_ENV_NAMES

    @property
    def api_base_url(self) -> str:
        return resolve_api_base_url(
            self.api_base_url_override,
            is_dev=self.is_dev,
            fallback=self.default_prod_api,
            origin=self.page_origin,
        )

    @property
    def absolute_api_base_url(self) -> str:
        """Resolved base URL usable by an HTTP session.

        Relative bases are joined onto the page origin, or onto the local
        development server when no origin is configured.
        """
        base = absolutize_base_url(self.api_base_url, self.page_origin or DEFAULT_DEV_ORIGIN)
        if not is_absolute_http_url(base):
            raise ConfigurationError(
                f"API base URL '{base}' is not an absolute http(s) URL",
                data={"base_url": base},
            )
        return base

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientSettings:
        """Build settings from environment variables.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        raw: dict[str, object] = {
            "api_base_url_override": env.get("PROCURE_API_BASE_URL"),
            "environment": env.get("PROCURE_ENV", "production"),
            "page_origin": env.get("PROCURE_PAGE_ORIGIN"),
        }
        if "PROCURE_DEFAULT_PROD_API" in env:
            raw["default_prod_api"] = env["PROCURE_DEFAULT_PROD_API"]
        if "PROCURE_REQUEST_TIMEOUT" in env:
            raw["request_timeout"] = env["PROCURE_REQUEST_TIMEOUT"]
        if "PROCURE_SESSION_COOKIE" in env:
            raw["session_cookie_name"] = env["PROCURE_SESSION_COOKIE"]
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid client settings: {e}") from e
