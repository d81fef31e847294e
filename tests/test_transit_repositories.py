"""Tests for the transport.rest repositories."""

from datetime import UTC, datetime
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from departure_board.adapters.transit_api import (
    DepartureParser,
    TransitApiError,
    TransitDepartureRepository,
    TransitHttpClient,
    TransitStopRepository,
)


def make_session(status: int = 200, json_data: Any = None, text: str = "") -> MagicMock:
    """Mock aiohttp session whose ``get`` works as an async context manager."""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_data)
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=None)

    session = MagicMock()
    session.get = MagicMock(return_value=context)
    return session


class TestTransitHttpClient:
    """Tests for the JSON client."""

    @pytest.mark.asyncio
    async def test_when_ok_then_returns_json_from_base_url(self) -> None:
        """Given a 200 response, when getting a path, then the URL is joined and JSON returned."""
        session = make_session(json_data={"ok": True})
        client = TransitHttpClient(session, base_url="https://v6.bvg.transport.rest/")

        data = await client.get_json("/stops/1/departures", {"results": 6})

        assert data == {"ok": True}
        args, kwargs = session.get.call_args
        assert args[0] == "https://v6.bvg.transport.rest/stops/1/departures"
        assert kwargs["params"] == {"results": 6}

    @pytest.mark.asyncio
    async def test_when_status_not_ok_then_raises_transit_api_error(self) -> None:
        """Given a 503 response, when getting a path, then TransitApiError carries the status."""
        session = make_session(status=503, text="Service Unavailable")
        client = TransitHttpClient(session)

        with pytest.raises(TransitApiError) as exc_info:
            await client.get_json("/stops/1/departures")

        assert exc_info.value.status == 503
        assert "Service Unavailable" in str(exc_info.value)


class TestTransitDepartureRepository:
    """Tests for fetching departures."""

    @pytest.mark.asyncio
    async def test_requests_stop_departures_with_count_and_duration(self) -> None:
        """Given a stop id, when fetching, then the departures endpoint is queried."""
        session = make_session(
            json_data={
                "departures": [
                    {
                        "tripId": "t1",
                        "when": "2026-10-19T10:07:00Z",
                        "direction": "Spandau",
                        "line": {"name": "U7", "product": "subway"},
                    }
                ]
            }
        )
        parser = DepartureParser(clock=lambda: datetime(2026, 10, 19, 10, 0, tzinfo=UTC))
        repository = TransitDepartureRepository(TransitHttpClient(session), parser)

        departures = await repository.get_departures("900000181503", results=6, duration_minutes=90)

        args, kwargs = session.get.call_args
        assert args[0].endswith("/stops/900000181503/departures")
        assert kwargs["params"] == {"duration": 90, "results": 6}
        assert [(d.id, d.line_name, d.minutes_until_departure) for d in departures] == [
            ("t1", "U7", 7)
        ]

    @pytest.mark.asyncio
    async def test_when_api_fails_then_error_propagates(self) -> None:
        """Given an API error, when fetching, then the error reaches the caller."""
        session = make_session(status=500, text="boom")
        repository = TransitDepartureRepository(TransitHttpClient(session))

        with pytest.raises(TransitApiError):
            await repository.get_departures("900000181503")


class TestTransitStopRepository:
    """Tests for stop search."""

    @pytest.mark.asyncio
    async def test_keeps_only_stops_and_ranks_by_matching_words(self) -> None:
        """Given mixed locations, when searching, then best matching stops come first."""
        session = make_session(
            json_data=[
                {"type": "stop", "id": "900000013102", "name": "U Kottbusser Tor"},
                {"type": "location", "id": "x", "name": "Kottbusser Tor 1"},
                {"type": "stop", "id": "900000013101", "name": "U Moritzplatz"},
                {"type": "station", "id": "900000013103", "name": "Kottbusser Brücke"},
            ]
        )
        repository = TransitStopRepository(TransitHttpClient(session))

        stops = await repository.search_stops("Kottbusser Tor")

        assert [stop.id for stop in stops] == ["900000013102", "900000013103", "900000013101"]
        assert stops[0].kind == "stop"
        _, kwargs = session.get.call_args
        assert kwargs["params"]["query"] == "Kottbusser Tor"
        assert kwargs["params"]["addresses"] == "false"

    @pytest.mark.asyncio
    async def test_accepts_wrapped_locations(self) -> None:
        """Given an object wrapping the locations, when searching, then its stops are returned."""
        session = make_session(
            json_data={"locations": [{"type": "stop", "id": "900000013102", "name": "U Kottbusser Tor"}]}
        )
        repository = TransitStopRepository(TransitHttpClient(session))

        stops = await repository.search_stops("Kottbusser Tor")

        assert [stop.id for stop in stops] == ["900000013102"]

    @pytest.mark.asyncio
    async def test_rejects_unexpected_payload(self) -> None:
        """Given a string payload, when searching, then ValueError is raised."""
        repository = TransitStopRepository(TransitHttpClient(make_session(json_data="nope")))

        with pytest.raises(ValueError, match="Unexpected locations payload"):
            await repository.search_stops("Kottbusser Tor")
