"""Sunrise/sunset repository adapter.

Uses api.sunrisesunset.io, which reports times of day in the local timezone of
the requested coordinate::

    {"results": {"sunrise": "7:21:35 AM", "sunset": "6:11:28 PM", ...}, "status": "OK"}
"""

import logging
from datetime import datetime, time
from typing import TYPE_CHECKING

import aiohttp

from departure_board.adapters.api_rate_limiter import DAYLIGHT_API, ApiRateLimiter
from departure_board.adapters.api_request_logger import log_api_request
from departure_board.domain.models.sun_times import SunTimes
from departure_board.domain.ports.daylight_repository import DaylightRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

_TIME_FORMATS = ("%I:%M:%S %p", "%H:%M:%S", "%H:%M")


def parse_time_of_day(value: str) -> time:
    """Parse a time-of-day string such as ``7:21:35 AM`` or ``19:02:11``."""
    for time_format in _TIME_FORMATS:
        try:
            return datetime.strptime(value.strip(), time_format).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized time of day: {value!r}")


class SunriseSunsetRepository(DaylightRepository):
    """Fetches local sunrise and sunset times for a coordinate."""

    def __init__(
        self,
        session: "ClientSession",
        api_url: str = "https://api.sunrisesunset.io/json",
        timeout_seconds: int = 10,
        min_delay_seconds: float = 0.5,
    ) -> None:
        """Initialize with an aiohttp session and the API endpoint."""
        self._session = session
        self.api_url = api_url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds

    async def get_sun_times(self, latitude: float, longitude: float) -> SunTimes:
        """Get today's sunrise and sunset.

        Raises:
            RuntimeError: If the API answers with an error status.
            ValueError: If the response lacks usable times.
        """
        params = {"lat": latitude, "lng": longitude}
        limiter = await ApiRateLimiter.get_instance(DAYLIGHT_API, self._min_delay_seconds)
        await limiter.acquire()
        log_api_request("GET", self.api_url, params)

        async with self._session.get(self.api_url, params=params, timeout=self._timeout) as response:
            if response.status != 200:
                response_text = await response.text()
                raise RuntimeError(
                    f"Sunrise/sunset API returned status {response.status}: {response_text[:200]}"
                )
            data = await response.json()

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, dict) or not results.get("sunrise") or not results.get("sunset"):
            raise ValueError("Sunrise/sunset response lacks sunrise or sunset")

        sun_times = SunTimes(
            sunrise=parse_time_of_day(results["sunrise"]),
            sunset=parse_time_of_day(results["sunset"]),
        )
        logger.debug(f"Sun times for {latitude},{longitude}: {sun_times}")
        return sun_times
