"""Resilient asynchronous client for the procurement API.

Every domain call goes through :class:`ApiClient`. A 401 on a regular
endpoint triggers one session refresh followed by one replay of the call;
everything else reaches the caller untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..constants import EXCLUDED_REFRESH_ENDPOINTS, SESSION_COOKIE_NAME
from ..errors.internal import ApiError
from .models import ApiResponse, FormField, RequestDescriptor
from .session_refresh import SessionRefresher
from .transport import Transport


def has_session_cookie(cookie_string: str, name: str = SESSION_COOKIE_NAME) -> bool:
    """Heuristic presence check on a ``name=value; ...`` cookie string.

    An expired but present cookie still counts as a session.
    """
    return f"{name}=" in (cookie_string or "")


def is_excluded_endpoint(path: str, excluded: Iterable[str] = EXCLUDED_REFRESH_ENDPOINTS) -> bool:
    return any(endpoint in path for endpoint in excluded)


class ApiClient:
    """Cookie-session API client with transparent refresh-and-retry.

    One instance is meant to be created at startup and shared by every
    caller; the refresh state and pending queue live on it.

    Args:
        transport: Transport used for regular calls.
        refresher: Session refresher; built on ``transport`` when omitted.
        session_cookie_name: Cookie looked up by :meth:`is_authenticated`.
    """

    def __init__(
        self,
        transport: Transport,
        refresher: SessionRefresher | None = None,
        *,
        session_cookie_name: str = SESSION_COOKIE_NAME,
    ) -> None:
        self.transport = transport
        self.refresher = refresher or SessionRefresher(transport)
        self.session_cookie_name = session_cookie_name

    # ---- protocol ----
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        form: Iterable[FormField] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> ApiResponse:
        """Issue a call, recovering once from an expired session.

        Raises:
            ApiError: Any HTTP error other than a recoverable 401.
            SessionExpiredError: If the refresh triggered by this call failed.
            NetworkError: If the request never got an HTTP answer.
        """
        descriptor = RequestDescriptor(
            method=method.upper(),
            path=path,
            params=params,
            json=json,
            form=tuple(form) if form is not None else None,
            headers=headers,
        )
        return await self.dispatch(descriptor)

    async def dispatch(self, descriptor: RequestDescriptor) -> ApiResponse:
        try:
            return await self.transport.send(descriptor)
        except ApiError as e:
            if not self._should_refresh(e, descriptor):
                raise
            logging.debug(f"🔐 401 on {descriptor.describe()} - refresh and retry")

        retry = descriptor.mark_retried()
        await self.refresher.refresh()
        return await self.transport.send(retry)

    @staticmethod
    def _should_refresh(error: ApiError, descriptor: RequestDescriptor) -> bool:
        if not error.is_unauthorized:
            return False
        if descriptor.retried:
            return False
        return not is_excluded_endpoint(descriptor.path)

    async def send_unauthenticated(
        self, method: str, path: str, *, json: Any = None
    ) -> ApiResponse:
        """Issue a call outside the refresh-and-retry protocol."""
        return await self.transport.send(
            RequestDescriptor(method=method.upper(), path=path, json=json)
        )

    # ---- verbs ----
    async def get(self, path: str, *, params: Mapping[str, str] | None = None) -> Any:
        return (await self.request("GET", path, params=params)).data

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        form: Iterable[FormField] | None = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        return (await self.request("POST", path, params=params, json=json, form=form)).data

    async def patch(self, path: str, json: Any = None) -> Any:
        return (await self.request("PATCH", path, json=json)).data

    async def put(self, path: str, json: Any = None) -> Any:
        return (await self.request("PUT", path, json=json)).data

    async def delete(self, path: str) -> Any:
        return (await self.request("DELETE", path)).data

    # ---- session helpers ----
    def cookie_string(self) -> str:
        jar = self.transport.session.cookie_jar
        return "; ".join(f"{morsel.key}={morsel.value}" for morsel in jar)

    def is_authenticated(self) -> bool:
        return has_session_cookie(self.cookie_string(), self.session_cookie_name)
