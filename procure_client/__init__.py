"""Asynchronous client for the procurement and expense-request API.

Typical use::

    async with await ApplicationContext.create() as ctx:
        await ctx.auth.login({"username": "...", "password": "..."})
        page = await ctx.requests.get_requests(status="pending")
"""

from .api import ApiClient, ApiResponse, FormField, RefreshState, SessionRefresher, Transport
from .application_context import ApplicationContext
from .config import ClientSettings, resolve_api_base_url
from .errors import ApiError, NetworkError, SessionExpiredError

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiResponse",
    "ApplicationContext",
    "ClientSettings",
    "FormField",
    "NetworkError",
    "RefreshState",
    "SessionExpiredError",
    "SessionRefresher",
    "Transport",
    "resolve_api_base_url",
]
