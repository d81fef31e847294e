"""Stop repository port."""

from typing import Protocol

from departure_board.domain.models.stop import Stop


class StopRepository(Protocol):
    """Port for searching stops by name."""

    async def search_stops(self, query: str, results: int = 20) -> list[Stop]:
        """Search stops and stations matching a free-text query."""
        ...
