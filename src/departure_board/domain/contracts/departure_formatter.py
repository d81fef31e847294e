"""Protocol for formatting departures for display."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from departure_board.domain.models.departure import Departure


class DepartureFormatterProtocol(Protocol):
    """Protocol for turning departures into display strings."""

    def format_minutes(self, departure: "Departure") -> str:
        """Format the countdown label, e.g. ``5'``, or an empty string for "now"."""
        ...

    def format_clock_time(self, departure: "Departure") -> str:
        """Format the absolute departure time as ``HH:MM``."""
        ...

    def format_update_time(self, update_time: "datetime | None") -> str:
        """Format the time of the last successful refresh."""
        ...
