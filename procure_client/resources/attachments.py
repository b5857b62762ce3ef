"""Attachment endpoints and the in-memory file type they upload."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..api.client import ApiClient
from ..api.models import FormField


@dataclass(frozen=True)
class UploadFile:
    """A file already loaded in memory, ready for a multipart body.

    Attributes:
        filename: Name sent with the file part.
        content: Raw bytes.
        content_type: MIME type of the part.
        description: Optional caption; callers usually default it to the file name.
        file_type: Document category expected by the API (``quote``, ``invoice``...).
    """

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
    description: str | None = None
    file_type: str = "other"

    def as_field(self, name: str) -> FormField:
        return FormField(
            name=name,
            value=self.content,
            filename=self.filename,
            content_type=self.content_type,
        )


def text_field(name: str, value: object) -> FormField:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return FormField(name=name, value=str(value))


class AttachmentsAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    async def get_attachments(self, request_id: int | str) -> Any:
        return await self._client.get("/attachments/", params={"request_id": str(request_id)})

    async def upload_attachment(
        self, fields: Mapping[str, object], file: UploadFile | None = None
    ) -> Any:
        """Upload a file plus its metadata fields as one multipart body.

        ``None`` field values are left out.
        """
        form = [text_field(key, value) for key, value in fields.items() if value is not None]
        if file is not None:
            form.append(file.as_field("file"))
        return await self._client.post("/attachments/", form=form)

    async def delete_attachment(self, attachment_id: int | str) -> Any:
        return await self._client.delete(f"/attachments/{attachment_id}/delete/")
