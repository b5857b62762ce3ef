from __future__ import annotations

from typing import Any

from ..api.client import ApiClient


class DashboardAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def get_dashboard(self) -> Any:
        return await self._client.get("/dashboard/")
