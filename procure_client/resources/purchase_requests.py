"""Purchase request endpoints: listing, creation and the approval actions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..api.client import ApiClient
from ..api.models import FormField
from ..utils.helpers import clean_params
from .attachments import UploadFile, text_field


class RequestsAPI:
    """Calls backing the request list, detail and validation views."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def get_requests(
        self,
        *,
        page: int | None = None,
        page_size: int | None = None,
        status: str | None = None,
        urgency: str | None = None,
        search: str | None = None,
        date_from: str | None = None,
        date_to: str | None = None,
        ordering: str | None = None,
        min_amount: float | str | None = None,
        max_amount: float | str | None = None,
    ) -> Any:
        """List requests; filters left as None or empty are not sent."""
        params = clean_params(
            {
                "page": page,
                "page_size": page_size,
                "status": status,
                "urgency": urgency,
                "search": search,
                "date_from": date_from,
                "date_to": date_to,
                "ordering": ordering,
                "min_amount": min_amount,
                "max_amount": max_amount,
            }
        )
        return await self._client.get("/requests/", params=params or None)

    async def get_request(self, request_id: int | str) -> Any:
        return await self._client.get(f"/requests/{request_id}/")

    async def create_request(self, data: Mapping[str, Any]) -> Any:
        return await self._client.post("/requests/", dict(data))

    async def validate_request(
        self,
        request_id: int | str,
        action: str,
        *,
        comment: str | None = None,
        budget_available: bool | None = None,
        final_cost: float | str | None = None,
        files: Sequence[UploadFile] = (),
        extra: Mapping[str, Any] | None = None,
    ) -> Any:
        """Approve or reject a request at the caller's step of the chain.

        With files attached the call is multipart: ``file_{i}``,
        ``description_{i}`` and ``file_type_{i}`` per file plus
        ``files_count``. Without files it is a plain JSON body.
        """
        path = f"/requests/{request_id}/validate/"
        if files:
            form: list[FormField] = [text_field("action", action)]
            if comment:
                form.append(text_field("comment", comment))
            if budget_available is not None:
                form.append(text_field("budget_available", budget_available))
            if final_cost:
                form.append(text_field("final_cost", final_cost))
            for index, upload in enumerate(files):
                form.append(upload.as_field(f"file_{index}"))
                form.append(text_field(f"description_{index}", upload.description or upload.filename))
                form.append(text_field(f"file_type_{index}", upload.file_type or "other"))
            form.append(text_field("files_count", len(files)))
            for key, value in (extra or {}).items():
                if value is not None:
                    form.append(text_field(key, value))
            return await self._client.post(path, form=form)

        body: dict[str, Any] = {"action": action}
        if comment is not None:
            body["comment"] = comment
        if budget_available is not None:
            body["budget_available"] = budget_available
        if final_cost is not None:
            body["final_cost"] = final_cost
        if extra:
            body.update(extra)
        return await self._client.post(path, body)

    async def update_rejection_reason(self, request_id: int | str, data: Mapping[str, Any]) -> Any:
        return await self._client.patch(f"/requests/{request_id}/update-rejection/", dict(data))
