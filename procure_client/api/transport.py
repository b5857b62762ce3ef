"""Single HTTP exchange against the procurement API.

The transport sends exactly one request per call and never retries; session
recovery lives one layer up in :mod:`procure_client.api.client`.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from ..constants import REQUEST_TIMEOUT_SECONDS
from ..errors.handling import wrap_transport_error
from ..errors.internal import ApiError, ParsingError
from .models import ApiResponse, RequestDescriptor, build_form_data


class Transport:
    """Sends request descriptors on a shared aiohttp session.

    Credentials travel in the session's cookie jar, so there is no
    ``Authorization`` header scheme here.

    Attributes:
        base_url (str): Absolute API base URL, without trailing slash.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        base_url: str,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        """Initialize the transport.

        Args:
            session: The aiohttp session (and cookie jar) to use.
            base_url: Absolute API base URL.
            timeout: Total timeout in seconds for each request.

        Raises:
            ValueError: If session or base_url is missing.
        """
        if not session:
            raise ValueError("aiohttp session required")
        if not base_url:
            raise ValueError("base_url required")
        self._session = session
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    @property
    def session(self) -> aiohttp.ClientSession:
        return self._session

    def build_url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def send(self, request: RequestDescriptor) -> ApiResponse:
        """Perform one HTTP request.

        Args:
            request: The call to issue.

        Returns:
            ApiResponse for any 2xx/3xx status.

        Raises:
            ApiError: If the API answers with status 400 or above.
            NetworkError: If the request never gets an HTTP answer.
        """
        url = self.build_url(request.path)
        kwargs: dict[str, Any] = {"timeout": self._timeout}
        if request.params:
            kwargs["params"] = dict(request.params)
        if request.headers:
            kwargs["headers"] = dict(request.headers)
        if request.form is not None:
            kwargs["data"] = build_form_data(request.form)
        elif request.json is not None:
            kwargs["json"] = request.json

        try:
            async with self._session.request(request.method, url, **kwargs) as resp:
                status = resp.status
                headers = dict(resp.headers)
                data = await self._read_payload(resp)
        except (aiohttp.ClientError, TimeoutError) as e:
            raise wrap_transport_error(e, request.method, url) from e
        except UnicodeDecodeError as e:
            raise ParsingError(
                f"Undecodable response body from {request.method} {request.path}",
                data={"url": url},
            ) from e

        logging.debug(
            f"API response: {request.method} {request.path} status={status} "
            f"retried={request.retried}"
        )
        if status >= 400:
            raise ApiError(
                f"HTTP {status} from {request.method} {request.path}",
                status=status,
                payload=data,
                method=request.method,
                url=url,
            )
        return ApiResponse(status=status, data=data, headers=headers)

    @staticmethod
    async def _read_payload(resp: aiohttp.ClientResponse) -> Any:
        """Decode a response body: JSON when possible, text otherwise, None if empty."""
        if resp.status == 204:
            return None
        text = await resp.text()
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text
