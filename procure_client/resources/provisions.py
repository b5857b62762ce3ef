"""Equipment provisioning requests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..api.client import ApiClient
from ..utils.helpers import clean_params


class ProvisionsAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def list(self, *, status: str | None = None, scope: str | None = None) -> Any:
        """List provisioning requests.

        ``status="all"`` means no status filter; ``scope="mine"`` limits to
        the caller's own requests.
        """
        params = clean_params(
            {
                "status": None if status == "all" else status,
                "scope": scope,
            }
        )
        return await self._client.get("/provisions/", params=params or None)

    async def create(self, data: Mapping[str, Any]) -> Any:
        return await self._client.post("/provisions/", dict(data))

    async def update(self, request_id: int | str, data: Mapping[str, Any]) -> Any:
        """Update a provisioning request.

        Raises:
            ValueError: If rejecting without a rejection_reason; no call is made.
        """
        body = dict(data)
        if body.get("status") == "rejected" and not str(body.get("rejection_reason") or "").strip():
            raise ValueError("A rejection_reason is required to reject a provisioning request")
        return await self._client.patch(f"/provisions/{request_id}/", body)
