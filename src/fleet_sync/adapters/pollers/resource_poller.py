"""Periodic re-fetch of a resource, applying each successful result."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable

from fleet_sync.domain.contracts.poller import PollerProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess

logger = logging.getLogger(__name__)


class ResourcePoller(PollerProtocol):
    """Runs ``fetch`` immediately on start, then every ``interval_seconds``.

    Ticks are scheduled from their start times, so a slow fetch does not
    stretch the period. A fetch that overruns the period delays the next tick
    instead of queueing missed ones.

    A failed tick is logged and the schedule continues; whatever was applied
    before stays in place. After ``stop()`` no result is applied any more.
    """

    def __init__(
        self,
        name: str,
        fetch: Callable[[], Awaitable[ApiResult]],
        apply: Callable[[ApiSuccess], None],
        interval_seconds: float,
    ) -> None:
        """Initialize the poller.

        Args:
            name: Name used in log messages.
            fetch: Performs one request.
            apply: Receives every successful result.
            interval_seconds: Time between the starts of two ticks.
        """
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.name = name
        self.fetch = fetch
        self.apply = apply
        self.interval_seconds = interval_seconds
        self.failed_ticks = 0
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the poller."""
        if self._task is not None and not self._task.done():
            logger.warning(f"Poller {self.name} already running")
            return
        self._running = True
        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started poller {self.name} (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the poller. Calling it again is a no-op."""
        self._running = False
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info(f"Stopped poller {self.name}")

    async def _poll_loop(self) -> None:
        next_tick = time.monotonic()
        while True:
            await self.tick()
            if not self._running:
                return
            next_tick += self.interval_seconds
            now = time.monotonic()
            if next_tick < now:
                logger.debug(f"Poller {self.name} overran its interval")
                next_tick = now
            await asyncio.sleep(next_tick - now)

    async def tick(self) -> None:
        """Fetch once and apply the result if the poller is still running."""
        try:
            result = await self.fetch()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self.failed_ticks += 1
            logger.error(f"Poller {self.name} failed: {e}")
            return

        if not self._running:
            logger.debug(f"Poller {self.name} stopped, discarding result")
            return
        if isinstance(result, ApiFailure):
            self.failed_ticks += 1
            logger.error(
                f"Poller {self.name} fetch failed: {result.kind} (status: {result.status})"
            )
            return
        try:
            self.apply(result)
        except Exception as e:
            self.failed_ticks += 1
            logger.error(f"Poller {self.name} could not apply result: {e}")


class PollerGroup:
    """Pollers started and stopped together, such as all those of one view."""

    def __init__(self, pollers: Iterable[PollerProtocol] = ()) -> None:
        self.pollers: list[PollerProtocol] = list(pollers)

    def add(self, poller: PollerProtocol) -> None:
        self.pollers.append(poller)

    async def start(self) -> None:
        for poller in self.pollers:
            await poller.start()

    async def stop(self) -> None:
        await asyncio.gather(*(poller.stop() for poller in self.pollers))

    async def __aenter__(self) -> PollerGroup:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
