"""Session refresh with a single in-flight guard.

Only one ``POST /auth/refresh/`` may be outstanding at a time. Calls that hit
a 401 while it runs park a future on the pending queue; when the refresh
settles the queue is drained in one pass, resolving every waiter on success
or rejecting every waiter with the same error on failure.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from ..constants import REFRESH_ENDPOINT
from ..errors.handling import log_error
from ..errors.internal import ApiError, InternalError, SessionExpiredError
from .models import RequestDescriptor
from .transport import Transport


class RefreshState(str, Enum):
    """Refresh state of one client.

    Attributes:
        IDLE: No refresh in flight.
        REFRESHING: A refresh call is outstanding; new 401s must queue.
    """

    IDLE = "idle"
    REFRESHING = "refreshing"


class SessionRefresher:
    """Owns the RefreshState and the pending queue of one client.

    The transport given here is used as is; it must not run the
    refresh-and-retry protocol itself, otherwise a 401 from the refresh
    endpoint would trigger another refresh.
    """

    def __init__(self, transport: Transport, endpoint: str = REFRESH_ENDPOINT) -> None:
        self._transport = transport
        self._endpoint = endpoint
        self.state = RefreshState.IDLE
        self._pending: list[asyncio.Future[None]] = []
        self.refresh_count = 0

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def is_refreshing(self) -> bool:
        return self.state is RefreshState.REFRESHING

    async def refresh(self) -> None:
        """Renew the session cookie, or wait for the refresh already running.

        Raises:
            SessionExpiredError: If the refresh (own or awaited) failed. Queued
                callers also get one, with ``status=None``, when the task
                running the refresh is cancelled.
            asyncio.CancelledError: If the caller's own task was cancelled.
        """
        if self.state is RefreshState.REFRESHING:
            waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._pending.append(waiter)
            logging.debug(f"⏳ Waiting for in-flight session refresh (queued={len(self._pending)})")
            await waiter
            return

        self.state = RefreshState.REFRESHING
        self.refresh_count += 1
        logging.info("🔄 Session expired - refreshing")
        try:
            await self._perform_refresh()
        except asyncio.CancelledError:
            self._settle(
                SessionExpiredError(
                    "Session refresh cancelled",
                    status=None,
                    method="POST",
                    url=self._transport.build_url(self._endpoint),
                )
            )
            raise
        except Exception as e:
            self._settle(e)
            log_error("Session refresh failed", e, context={"endpoint": self._endpoint})
            raise
        self._settle(None)
        logging.info("✅ Session refreshed")

    async def _perform_refresh(self) -> None:
        # Marked retried so nothing downstream ever treats it as refreshable
        request = RequestDescriptor("POST", self._endpoint, retried=True)
        url = self._transport.build_url(self._endpoint)
        try:
            response = await self._transport.send(request)
        except ApiError as e:
            raise SessionExpiredError(
                f"Session refresh rejected with HTTP {e.status}",
                status=e.status,
                payload=e.payload,
                method=request.method,
                url=url,
            ) from e
        except InternalError as e:
            raise SessionExpiredError(
                f"Session refresh failed: {e}",
                status=None,
                method=request.method,
                url=url,
            ) from e
        if response.status != 200:
            raise SessionExpiredError(
                f"Session refresh returned unexpected HTTP {response.status}",
                status=response.status,
                payload=response.data,
                method=request.method,
                url=url,
            )

    def _settle(self, error: BaseException | None) -> None:
        """Return to IDLE and drain the queue; every waiter is settled exactly once."""
        self.state = RefreshState.IDLE
        waiters, self._pending = self._pending, []
        if waiters:
            logging.debug(f"📤 Releasing {len(waiters)} queued call(s) after refresh")
        for waiter in waiters:
            if waiter.done():  # waiter's own task was cancelled meanwhile
                continue
            if error is not None:
                waiter.set_exception(error)
            else:
                waiter.set_result(None)
