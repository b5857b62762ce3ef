"""Central application context for shared async resources."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from .api.client import ApiClient
from .api.transport import Transport
from .config.settings import ClientSettings
from .resources import (
    AttachmentsAPI,
    AuthAPI,
    BudgetsAPI,
    CommunityAPI,
    DashboardAPI,
    PasswordResetAPI,
    ProvisionsAPI,
    RequestsAPI,
    UsersAPI,
)


class ApplicationContext:
    """Holds the HTTP session, the shared client and the resource objects.

    One context per user session: the refresh state of the client must be
    shared by every caller for the single-refresh guarantee to hold.
    """

    session: aiohttp.ClientSession | None
    client: ApiClient | None
    _lock: asyncio.Lock

    def __init__(self, settings: ClientSettings) -> None:
        self.settings = settings
        self.session = None
        self.client = None
        self._lock = asyncio.Lock()

    # ------------------------- Construction ------------------------- #
    @classmethod
    async def create(cls, settings: ClientSettings | None = None) -> ApplicationContext:
        """Create and initialize a new ApplicationContext instance.

        Args:
            settings: Client settings; read from the environment when omitted.

        Returns:
            A fully initialized ApplicationContext instance.

        Raises:
            ConfigurationError: If the settings are invalid.
        """
        settings = settings or ClientSettings.from_env()
        base_url = settings.absolute_api_base_url
        ctx = cls(settings)
        logging.debug("🧪 Creating application context")
        # unsafe=True keeps cookies for IP hosts (local API servers)
        ctx.session = aiohttp.ClientSession(
            cookie_jar=aiohttp.CookieJar(unsafe=True),
            headers={"Accept": "application/json"},
        )
        transport = Transport(ctx.session, base_url, timeout=settings.request_timeout)
        ctx.client = ApiClient(transport, session_cookie_name=settings.session_cookie_name)
        ctx._bind_resources(ctx.client)
        logging.debug(f"🔗 HTTP session created for {base_url}")
        return ctx

    def _bind_resources(self, client: ApiClient) -> None:
        self.auth = AuthAPI(client)
        self.password_reset = PasswordResetAPI(client)
        self.requests = RequestsAPI(client)
        self.attachments = AttachmentsAPI(client)
        self.users = UsersAPI(client)
        self.budgets = BudgetsAPI(client)
        self.provisions = ProvisionsAPI(client)
        self.community = CommunityAPI(client)
        self.dashboard = DashboardAPI(client)

    # --------------------------- Lifecycle -------------------------- #
    def is_authenticated(self) -> bool:
        return bool(self.client and self.client.is_authenticated())

    async def shutdown(self) -> None:
        """Close the HTTP session. Safe to call more than once."""
        async with self._lock:
            if self.session and not self.session.closed:
                try:
                    await self.session.close()
                    logging.debug("🔌 HTTP session closed")
                except (aiohttp.ClientError, OSError) as e:
                    logging.warning(f"Error closing HTTP session: {e}")
            self.session = None

    async def __aenter__(self) -> ApplicationContext:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()
