"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Departure:
    """Represents a single scheduled departure from the monitored stop."""

    id: str  # Trip identifier, unique within the visible window
    line_type: str  # Product category (e.g. "bus", "subway"), picks the icon
    line_name: str
    destination: str
    minutes_until_departure: int  # <= 0 means "departing now or overdue"
    departure_time: datetime
    is_cancelled: bool = False
    delay_seconds: int | None = None

    @property
    def is_now(self) -> bool:
        """Whether the departure should be shown as leaving now."""
        return self.minutes_until_departure <= 0
