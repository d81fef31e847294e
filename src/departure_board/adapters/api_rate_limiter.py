"""Spacing of outgoing requests per upstream API.

Every connected board runs its own refresh loop, so without spacing all
boards hit transport.rest (and the sunrise API) in the same instant after a
deploy or a network hiccup. Callers reserve the next free slot for their API
and sleep until it starts; the lock is only held while reserving.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)

TRANSIT_API = "transit_api"
DAYLIGHT_API = "daylight_api"


class ApiRateLimiter:
    """Hands out request slots at least ``min_delay_seconds`` apart."""

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, api_name: str, min_delay_seconds: float = 0.5) -> None:
        self.api_name = api_name
        self.min_delay_seconds = max(min_delay_seconds, 0.0)
        self._next_slot: float = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    async def get_instance(cls, api_name: str, min_delay_seconds: float = 0.5) -> ApiRateLimiter:
        """Return the limiter shared by all clients of ``api_name``.

        The delay of the first caller wins; later callers with a different
        delay get a warning.
        """
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            limiter = cls._instances.get(api_name)
            if limiter is None:
                limiter = cls(api_name, min_delay_seconds)
                cls._instances[api_name] = limiter
                logger.info(f"Spacing {api_name} requests by {limiter.min_delay_seconds}s")
            elif limiter.min_delay_seconds != max(min_delay_seconds, 0.0):
                logger.warning(
                    f"Ignoring delay {min_delay_seconds}s for {api_name}, "
                    f"already spaced by {limiter.min_delay_seconds}s"
                )
            return limiter

    async def acquire(self) -> float:
        """Wait for the next free slot.

        Returns:
            Seconds spent waiting.
        """
        async with self._lock:
            now = time.monotonic()
            slot = max(now, self._next_slot)
            self._next_slot = slot + self.min_delay_seconds

        wait_time = slot - now
        if wait_time > 0:
            logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s for request slot")
            await asyncio.sleep(wait_time)
        return wait_time
