"""Formatter for departure times."""

from datetime import datetime
from zoneinfo import ZoneInfo

from departure_board.domain.contracts.departure_formatter import DepartureFormatterProtocol
from departure_board.domain.models.departure import Departure

# Line categories with an icon under static/icons
KNOWN_LINE_TYPES = frozenset(
    {"bus", "express", "ferry", "regional", "suburban", "subway", "tram"}
)


class DepartureFormatter(DepartureFormatterProtocol):
    """Formats departures for the board according to the configured timezone."""

    def __init__(self, timezone: str = "Europe/Berlin") -> None:
        """Initialize the formatter.

        Args:
            timezone: IANA timezone for clock times.
        """
        self._timezone = ZoneInfo(timezone)

    def format_minutes(self, departure: Departure) -> str:
        """Format the countdown, e.g. ``5'``.

        Departures leaving now or overdue get an empty label; the template shows
        the "now" indicator instead of a number.
        """
        if departure.is_now:
            return ""
        return f"{departure.minutes_until_departure}'"

    def format_clock_time(self, departure: Departure) -> str:
        """Format the departure time as ``HH:MM`` in the configured timezone."""
        return departure.departure_time.astimezone(self._timezone).strftime("%H:%M")

    def format_update_time(self, update_time: datetime | None) -> str:
        """Format last update time."""
        if not update_time:
            return "Never"
        return update_time.astimezone(self._timezone).strftime("%H:%M:%S")

    @staticmethod
    def icon_path(line_type: str) -> str:
        """Path of the icon asset for a line category."""
        name = line_type if line_type in KNOWN_LINE_TYPES else "unknown"
        return f"/static/icons/{name}.svg"
