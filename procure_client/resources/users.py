"""User administration endpoints."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..api.client import ApiClient
from ..utils.helpers import clean_params


class UsersAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def create_user(self, user_data: Mapping[str, Any]) -> Any:
        return await self._client.post("/auth/register/", dict(user_data))

    async def get_users(
        self,
        *,
        page: int | None = None,
        search: str | None = None,
        role: str | None = None,
        created_by: int | str | None = None,
        is_active: bool | None = None,
    ) -> Any:
        """List users. ``is_active=False`` is sent; ``None`` means no filter."""
        params = clean_params(
            {
                "page": page or None,
                "search": search,
                "role": role,
                "created_by": created_by,
                "is_active": is_active,
            }
        )
        return await self._client.get("/users/", params=params or None)

    async def get_user(self, user_id: int | str) -> Any:
        return await self._client.get(f"/users/{user_id}/")

    async def update_user(self, user_id: int | str, user_data: Mapping[str, Any]) -> Any:
        return await self._client.patch(f"/users/{user_id}/", dict(user_data))

    async def get_users_stats(self) -> Any:
        return await self._client.get("/users/stats/")

    async def delete_user(self, user_id: int | str) -> Any:
        return await self._client.delete(f"/users/{user_id}/")
