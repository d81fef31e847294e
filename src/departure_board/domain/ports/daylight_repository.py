"""Daylight repository port."""

from typing import Protocol

from departure_board.domain.models.sun_times import SunTimes


class DaylightRepository(Protocol):
    """Port for retrieving sunrise and sunset times."""

    async def get_sun_times(self, latitude: float, longitude: float) -> SunTimes:
        """Get today's local sunrise and sunset for a coordinate."""
        ...
