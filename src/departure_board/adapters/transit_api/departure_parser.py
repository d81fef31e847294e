"""Parser for transport.rest departure responses.

Two response shapes are accepted: older deployments (v5) return a bare list of
departures, newer ones (v6) wrap the list in an object::

    {
      "departures": [
        {
          "tripId": "1|31707|4|86|19102026",
          "when": "2026-10-19T12:04:00+02:00",
          "plannedWhen": "2026-10-19T12:03:00+02:00",
          "delay": 60,
          "direction": "S+U Pankow",
          "line": {"name": "M27", "product": "tram"},
          "cancelled": false
        }
      ]
    }
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from departure_board.domain.models.departure import Departure

logger = logging.getLogger(__name__)


def extract_departure_records(data: Any) -> list[dict[str, Any]]:
    """Return the list of raw departure records from either response shape."""
    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        records = data.get("departures") or []
    else:
        raise ValueError(f"Unexpected departures payload type: {type(data).__name__}")
    return [record for record in records if isinstance(record, dict)]


def minutes_until(departure_time: datetime, now: datetime) -> int:
    """Whole minutes from ``now`` (truncated to the minute) until ``departure_time``.

    Zero or negative values mean the vehicle is departing now or is overdue.
    """
    now_minute = now.replace(second=0, microsecond=0)
    return int((departure_time - now_minute).total_seconds() // 60)


def _parse_time(value: str | None) -> datetime | None:
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class DepartureParser:
    """Maps raw transport.rest departure records onto Departure objects."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        """Initialize the parser.

        Args:
            clock: Returns the current aware datetime; defaults to UTC now.
        """
        self._clock = clock or (lambda: datetime.now(UTC))

    def parse_departures(self, data: Any) -> list[Departure]:
        """Parse a departures response body, skipping malformed records."""
        now = self._clock()
        departures = []
        for record in extract_departure_records(data):
            try:
                departure = self._parse_departure(record, now)
            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Error processing departure record: {e}")
                continue
            if departure is not None:
                departures.append(departure)
        return departures

    def _parse_departure(self, record: dict[str, Any], now: datetime) -> Departure | None:
        trip_id = record.get("tripId")
        if not trip_id:
            logger.warning("Skipping departure without tripId")
            return None

        # "when" is null for cancelled trips, the planned time is still known
        departure_time = _parse_time(record.get("when")) or _parse_time(record.get("plannedWhen"))
        if departure_time is None:
            logger.warning(f"Skipping departure {trip_id} without departure time")
            return None

        line = record.get("line") or {}
        destination = record.get("direction") or ""
        if not destination and isinstance(record.get("destination"), dict):
            destination = record["destination"].get("name", "") or ""

        delay = record.get("delay")
        return Departure(
            id=str(trip_id),
            line_type=line.get("product", "") or "",
            line_name=line.get("name", "") or line.get("id", "") or "",
            destination=destination,
            minutes_until_departure=minutes_until(departure_time, now),
            departure_time=departure_time,
            is_cancelled=bool(record.get("cancelled", False)),
            delay_seconds=int(delay) if delay is not None else None,
        )
