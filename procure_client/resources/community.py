"""Community incident reports and their comment threads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..api.client import ApiClient


class CommunityAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def list_reports(self) -> Any:
        return await self._client.get("/community/reports/")

    async def create_report(self, data: Mapping[str, Any]) -> Any:
        body = dict(data)
        body.setdefault("category", "other")
        return await self._client.post("/community/reports/", body)

    async def add_comment(self, report_id: int | str, content: str) -> Any:
        if not content or not content.strip():
            raise ValueError("Comment content must not be blank")
        return await self._client.post(
            f"/community/reports/{report_id}/comments/", {"content": content}
        )

    async def update_report(self, report_id: int | str, data: Mapping[str, Any]) -> Any:
        return await self._client.patch(f"/community/reports/{report_id}/", dict(data))
