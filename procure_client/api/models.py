"""Value types exchanged between the client, its transport and callers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

import aiohttp


@dataclass(frozen=True)
class FormField:
    """One part of a multipart body.

    Attributes:
        name: Form field name.
        value: Text value or raw file bytes.
        filename: Set for file parts.
        content_type: Optional MIME type of the part.
    """

    name: str
    value: str | bytes
    filename: str | None = None
    content_type: str | None = None


def build_form_data(fields: tuple[FormField, ...]) -> aiohttp.FormData:
    """Build a fresh FormData; aiohttp refuses to serialize one twice."""
    form = aiohttp.FormData()
    for part in fields:
        form.add_field(
            part.name,
            part.value,
            filename=part.filename,
            content_type=part.content_type,
        )
    return form


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to (re)issue one logical API call.

    ``retried`` is the one-shot marker of the refresh-and-retry protocol: a
    descriptor that already went through a refresh is never refreshed again.
    """

    method: str
    path: str
    params: Mapping[str, str] | None = None
    json: Any = None
    form: tuple[FormField, ...] | None = None
    headers: Mapping[str, str] | None = None
    retried: bool = False

    def mark_retried(self) -> RequestDescriptor:
        return replace(self, retried=True)

    @property
    def is_multipart(self) -> bool:
        return self.form is not None

    def describe(self) -> str:
        return f"{self.method} {self.path}"


@dataclass
class ApiResponse:
    """Decoded response of a successful call."""

    status: int
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)
