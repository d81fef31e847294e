"""Shared test doubles and factories."""

from datetime import UTC, datetime, timedelta

from departure_board.application.services import DepartureBoard
from departure_board.domain.models import BoardEntry, Departure, SunTimes, Theme


def make_departure(
    trip_id: str,
    minutes: int = 5,
    line_name: str = "M27",
    line_type: str = "tram",
    destination: str = "S+U Pankow",
    is_cancelled: bool = False,
) -> Departure:
    """Create a departure leaving in ``minutes`` minutes."""
    return Departure(
        id=trip_id,
        line_type=line_type,
        line_name=line_name,
        destination=destination,
        minutes_until_departure=minutes,
        departure_time=datetime(2026, 10, 19, 10, 0, tzinfo=UTC) + timedelta(minutes=minutes),
        is_cancelled=is_cancelled,
    )


class FakeDepartureRepository:
    """Departure repository returning a configurable batch and counting calls."""

    def __init__(self, departures: list[Departure] | None = None) -> None:
        self.departures = departures or []
        self.calls: list[tuple[str, int, int]] = []
        self.error: Exception | None = None

    async def get_departures(
        self, stop_id: str, results: int = 6, duration_minutes: int = 120
    ) -> list[Departure]:
        self.calls.append((stop_id, results, duration_minutes))
        if self.error is not None:
            raise self.error
        return list(self.departures)


class FakeThemeStrategy:
    """Theme strategy returning a fixed theme, or raising."""

    def __init__(self, theme: Theme = Theme.DARK, error: Exception | None = None) -> None:
        self.theme = theme
        self.error = error
        self.calls = 0

    async def resolve(self) -> Theme:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.theme


class FakeDaylightRepository:
    """Daylight repository returning fixed sun times."""

    def __init__(self, sun_times: SunTimes) -> None:
        self.sun_times = sun_times
        self.calls: list[tuple[float, float]] = []

    async def get_sun_times(self, latitude: float, longitude: float) -> SunTimes:
        self.calls.append((latitude, longitude))
        return self.sun_times


def entry_for(board: DepartureBoard, trip_id: str) -> BoardEntry:
    """Return the row showing ``trip_id``; fails the test when it is missing."""
    matches = [entry for entry in board.entries if entry.id == trip_id]
    assert matches, f"no row for {trip_id}"
    return matches[0]
