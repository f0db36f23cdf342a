"""Periodic cleanup of expired sessions."""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from event_access.services.sessions import Clock, SessionStore, utc_now

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_INTERVAL_SECONDS = 60 * 60


@dataclass
class SessionReaper:
    """Sweeps expired sessions out of the store on a fixed interval."""

    store: SessionStore
    interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS
    clock: Clock = field(default=utc_now)
    sleep: Callable[[float], Awaitable[None]] = field(default=asyncio.sleep)
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        """Remove expired sessions now and return how many were removed."""
        removed = self.store.sweep(self.clock())
        if removed:
            logger.info("Cleaned %d expired session(s)", removed)
        return removed

    async def run(self) -> None:
        """Sweep forever, sleeping ``interval_seconds`` before each pass."""
        while True:
            await self.sleep(self.interval_seconds)
            self.sweep_once()

    def start(self) -> asyncio.Task[None]:
        """Schedule the sweep loop on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run(), name="session-reaper")
        return self._task

    async def stop(self) -> None:
        """Cancel the sweep loop and wait for it to finish."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
