"""Departure repository port."""

from typing import Protocol

from departure_board.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving upcoming departures at a stop."""

    async def get_departures(
        self,
        stop_id: str,
        results: int = 6,
        duration_minutes: int = 120,
    ) -> list[Departure]:
        """Get departures for a stop, in the order the API returns them."""
        ...
