"""Tests for the sunrise/sunset repository and the daylight theme strategy."""

from datetime import UTC, datetime, time
from unittest.mock import AsyncMock, MagicMock

import pytest

from departure_board.adapters.daylight_api import SunriseSunsetRepository, parse_time_of_day
from departure_board.application.services import DaylightThemeStrategy
from departure_board.domain.models import SunTimes, Theme
from tests.fakes import FakeDaylightRepository


def make_session(status: int = 200, json_data: object = None) -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_data)
    response.text = AsyncMock(return_value="error")

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=None)

    session = MagicMock()
    session.get = MagicMock(return_value=context)
    return session


class TestParseTimeOfDay:
    """Tests for time-of-day parsing."""

    def test_parses_twelve_hour_clock(self) -> None:
        """Given an AM/PM string, when parsing, then a 24h time is returned."""
        assert parse_time_of_day("6:11:28 PM") == time(18, 11, 28)
        assert parse_time_of_day("7:21:35 AM") == time(7, 21, 35)

    def test_parses_twenty_four_hour_clock(self) -> None:
        """Given a 24h string, when parsing, then the time is returned."""
        assert parse_time_of_day("19:02:11") == time(19, 2, 11)

    def test_rejects_garbage(self) -> None:
        """Given an unknown format, when parsing, then ValueError is raised."""
        with pytest.raises(ValueError, match="Unrecognized time of day"):
            parse_time_of_day("dusk")


class TestSunriseSunsetRepository:
    """Tests for fetching sun times."""

    @pytest.mark.asyncio
    async def test_returns_sun_times_for_coordinate(self) -> None:
        """Given a valid response, when fetching, then sunrise and sunset are parsed."""
        session = make_session(
            json_data={"results": {"sunrise": "7:21:35 AM", "sunset": "6:11:28 PM"}, "status": "OK"}
        )
        repository = SunriseSunsetRepository(session)

        sun_times = await repository.get_sun_times(52.52, 13.405)

        assert sun_times == SunTimes(sunrise=time(7, 21, 35), sunset=time(18, 11, 28))
        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"lat": 52.52, "lng": 13.405}

    @pytest.mark.asyncio
    async def test_when_status_not_ok_then_raises(self) -> None:
        """Given an error status, when fetching, then RuntimeError is raised."""
        repository = SunriseSunsetRepository(make_session(status=500))

        with pytest.raises(RuntimeError, match="status 500"):
            await repository.get_sun_times(52.52, 13.405)

    @pytest.mark.asyncio
    async def test_when_times_missing_then_raises(self) -> None:
        """Given a response without sunset, when fetching, then ValueError is raised."""
        repository = SunriseSunsetRepository(make_session(json_data={"results": {"sunrise": "7:00:00 AM"}}))

        with pytest.raises(ValueError, match="lacks sunrise or sunset"):
            await repository.get_sun_times(52.52, 13.405)


class TestDaylightThemeStrategy:
    """Tests for choosing the theme from sun times."""

    SUN_TIMES = SunTimes(sunrise=time(7, 0), sunset=time(18, 0))

    @pytest.mark.asyncio
    async def test_when_between_sunrise_and_sunset_then_light(self) -> None:
        """Given local noon, when resolving, then the light theme is chosen."""
        repository = FakeDaylightRepository(self.SUN_TIMES)
        strategy = DaylightThemeStrategy(
            repository, 52.52, 13.405, clock=lambda: datetime(2026, 10, 19, 10, 0, tzinfo=UTC)
        )

        assert await strategy.resolve() == Theme.LIGHT
        assert repository.calls == [(52.52, 13.405)]

    @pytest.mark.asyncio
    async def test_when_after_sunset_then_dark(self) -> None:
        """Given local evening, when resolving, then the dark theme is chosen."""
        strategy = DaylightThemeStrategy(
            FakeDaylightRepository(self.SUN_TIMES),
            52.52,
            13.405,
            clock=lambda: datetime(2026, 10, 19, 19, 30, tzinfo=UTC),
        )

        assert await strategy.resolve() == Theme.DARK

    @pytest.mark.asyncio
    async def test_compares_in_local_timezone(self) -> None:
        """Given 16:30 UTC (18:30 in Berlin summer time), when resolving, then it is already dark."""
        strategy = DaylightThemeStrategy(
            FakeDaylightRepository(self.SUN_TIMES),
            52.52,
            13.405,
            timezone="Europe/Berlin",
            clock=lambda: datetime(2026, 7, 1, 16, 30, tzinfo=UTC),
        )

        assert await strategy.resolve() == Theme.DARK

    @pytest.mark.asyncio
    async def test_when_before_sunrise_then_dark(self) -> None:
        """Given early morning, when resolving, then the dark theme is chosen."""
        strategy = DaylightThemeStrategy(
            FakeDaylightRepository(self.SUN_TIMES),
            52.52,
            13.405,
            timezone="UTC",
            clock=lambda: datetime(2026, 10, 19, 5, 0, tzinfo=UTC),
        )

        assert await strategy.resolve() == Theme.DARK
