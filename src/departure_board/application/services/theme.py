"""Theme strategies for the board."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from departure_board.domain.models.theme import Theme
from departure_board.domain.ports.daylight_repository import DaylightRepository

logger = logging.getLogger(__name__)


class DaylightThemeStrategy:
    """Light theme between sunrise and sunset, dark theme otherwise."""

    def __init__(
        self,
        daylight_repository: DaylightRepository,
        latitude: float,
        longitude: float,
        timezone: str = "Europe/Berlin",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the strategy.

        Args:
            daylight_repository: Source of sunrise/sunset times.
            latitude: Latitude of the monitored stop.
            longitude: Longitude of the monitored stop.
            timezone: IANA timezone the sun times are expressed in.
            clock: Returns the current aware datetime; defaults to UTC now.
        """
        self._daylight_repository = daylight_repository
        self.latitude = latitude
        self.longitude = longitude
        self._timezone = ZoneInfo(timezone)
        self._clock = clock or (lambda: datetime.now(UTC))

    async def resolve(self) -> Theme:
        """Fetch today's sun times and pick the matching theme."""
        sun_times = await self._daylight_repository.get_sun_times(self.latitude, self.longitude)
        local_now = self._clock().astimezone(self._timezone).time().replace(tzinfo=None)
        theme = Theme.LIGHT if sun_times.is_daytime(local_now) else Theme.DARK
        logger.debug(
            f"Daylight check at {local_now:%H:%M}: sunrise {sun_times.sunrise:%H:%M}, "
            f"sunset {sun_times.sunset:%H:%M} -> {theme.value}"
        )
        return theme
