"""Authentication and account endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..api.client import ApiClient
from ..constants import LOGIN_ENDPOINT, LOGOUT_ENDPOINT, REFRESH_ENDPOINT


class AuthAPI:
    """Login, logout and profile calls.

    Login, refresh and logout are excluded from the refresh-and-retry
    protocol, so a 401 from them reaches the caller directly.
    """

    def __init__(self, client: ApiClient):
        self._client = client

    async def login(self, credentials: Mapping[str, Any]) -> Any:
        return await self._client.post(LOGIN_ENDPOINT, dict(credentials))

    async def get_current_user(self) -> Any:
        return await self._client.get("/auth/me/")

    async def refresh_token(self) -> Any:
        return await self._client.post(REFRESH_ENDPOINT)

    async def logout(self) -> Any:
        return await self._client.post(LOGOUT_ENDPOINT)

    async def change_password(self, password_data: Mapping[str, Any]) -> Any:
        return await self._client.post("/auth/change-password/", dict(password_data))

    async def update_profile(self, user_id: int | str, profile_data: Mapping[str, Any]) -> Any:
        return await self._client.patch(f"/users/{user_id}/", dict(profile_data))


class PasswordResetAPI:
    """Password reset flow.

    These calls happen before any session exists and never trigger a
    session refresh.
    """

    def __init__(self, client: ApiClient):
        self._client = client

    async def request_reset(self, email: str) -> Any:
        response = await self._client.send_unauthenticated(
            "POST", "/auth/password-reset/request/", json={"email": email}
        )
        return response.data

    async def verify_code(self, email: str, code: str) -> Any:
        response = await self._client.send_unauthenticated(
            "POST", "/auth/password-reset/verify/", json={"email": email, "code": code}
        )
        return response.data

    async def confirm_reset(self, token: str, new_password: str, confirm_password: str) -> Any:
        response = await self._client.send_unauthenticated(
            "POST",
            "/auth/password-reset/confirm/",
            json={
                "token": token,
                "new_password": new_password,
                "confirm_password": confirm_password,
            },
        )
        return response.data
