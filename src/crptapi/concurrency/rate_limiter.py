"""Fixed-window rate limiter with FIFO admission and explicit shutdown."""

from __future__ import annotations

import asyncio
import collections
import contextlib
import logging
from datetime import timedelta

from crptapi.errors.exceptions import LimiterShutdownError
from crptapi.types import TimeUnit, to_seconds

logger = logging.getLogger(__name__)


class RateLimiter:
    """Admits at most ``request_limit`` callers per ``time_unit``.

    Windows are contiguous and fixed: one background task wakes once per period,
    resets the permit count and hands permits to queued callers in the order
    they called ``acquire()``. All state changes happen on the event loop
    between suspension points, so no lock is needed.
    """

    def __init__(
        self,
        time_unit: TimeUnit | str | timedelta | float,
        request_limit: int,
    ) -> None:
        if isinstance(request_limit, bool) or not isinstance(request_limit, int):
            raise ValueError(f"request_limit must be an integer, got {request_limit!r}")
        if request_limit < 1:
            raise ValueError(f"request_limit must be at least 1, got {request_limit}")

        self._period = to_seconds(time_unit)
        self._request_limit = request_limit

        # Window state
        self._available = request_limit
        self._window = 0
        self._waiters: collections.deque[asyncio.Future[int]] = collections.deque()

        self._ticker: asyncio.Task[None] | None = None
        self._shutdown = False

        # Stats
        self._total_admitted = 0
        self._total_wait_seconds = 0.0

    @property
    def period(self) -> float:
        return self._period

    @property
    def request_limit(self) -> int:
        return self._request_limit

    @property
    def available(self) -> int:
        return self._available

    @property
    def waiting(self) -> int:
        # Granted, failed and cancelled futures never stay queued.
        return len(self._waiters)

    @property
    def window(self) -> int:
        """Index of the current window, starting at 0."""
        return self._window

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    @property
    def stats(self) -> dict:
        """Return current rate limiter statistics."""
        return {
            "available": self._available,
            "waiting": self.waiting,
            "window": self._window,
            "total_admitted": self._total_admitted,
            "total_wait_seconds": self._total_wait_seconds,
        }

    def start(self) -> None:
        """Start the replenishment task on the running loop (idempotent)."""
        if self._shutdown:
            raise LimiterShutdownError("Rate limiter has been shut down")
        if self._ticker is not None:
            return
        self._ticker = asyncio.get_running_loop().create_task(
            self._replenish_forever(), name="crptapi-rate-limiter"
        )
        logger.debug(
            "Rate limiter started: %d permits every %.3fs", self._request_limit, self._period
        )

    async def acquire(self) -> None:
        """Wait until a permit is available in this or a later window, then take it.

        Raises LimiterShutdownError if the limiter is (or gets) shut down first.
        """
        self.start()

        if self._available > 0 and not self._waiters:
            self._admit()
            return

        loop = asyncio.get_running_loop()
        fut: asyncio.Future[int] = loop.create_future()
        self._waiters.append(fut)
        queued_at = loop.time()
        logger.debug(
            "Permits exhausted in window %d, queued (%d waiting)",
            self._window,
            len(self._waiters),
        )

        try:
            await fut
        except asyncio.CancelledError:
            if fut.done() and not fut.cancelled() and fut.exception() is None:
                # Granted just before the caller was cancelled: pass the permit on
                # if its window is still open.
                self._total_admitted -= 1
                if fut.result() == self._window:
                    self._available += 1
                    self._wake_waiters()
            else:
                self._discard(fut)
            raise

        self._total_wait_seconds += loop.time() - queued_at

    def shutdown(self) -> None:
        """Stop replenishment and fail every queued caller (idempotent).

        Call it on the loop that started the limiter. Once that loop is closed
        there is nothing left to cancel and only the local state is cleared.
        """
        if self._shutdown:
            return
        self._shutdown = True

        if self._ticker is not None:
            if not self._ticker.done() and not self._ticker.get_loop().is_closed():
                self._ticker.cancel()
            self._ticker = None

        cancelled = 0
        while self._waiters:
            fut = self._waiters.popleft()
            if not fut.done() and not fut.get_loop().is_closed():
                fut.set_exception(LimiterShutdownError("Rate limiter shut down while waiting"))
                cancelled += 1

        logger.debug("Rate limiter shut down, released %d waiter(s)", cancelled)

    async def __aenter__(self) -> RateLimiter:
        self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.shutdown()

    async def _replenish_forever(self) -> None:
        while True:
            await asyncio.sleep(self._period)
            self._replenish()

    def _replenish(self) -> None:
        """Open the next window: reset permits and wake queued callers in order."""
        self._window += 1
        self._available = self._request_limit
        self._wake_waiters()

    def _wake_waiters(self) -> None:
        while self._available > 0 and self._waiters:
            fut = self._waiters.popleft()
            if fut.done():
                continue
            fut.set_result(self._window)
            self._admit()

    def _admit(self) -> None:
        self._available -= 1
        self._total_admitted += 1

    def _discard(self, fut: asyncio.Future[int]) -> None:
        with contextlib.suppress(ValueError):
            self._waiters.remove(fut)
