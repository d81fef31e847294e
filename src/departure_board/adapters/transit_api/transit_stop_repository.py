"""transport.rest stop search adapter."""

import logging

from departure_board.adapters.transit_api.http_client import TransitHttpClient
from departure_board.domain.models.stop import Stop
from departure_board.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


class TransitStopRepository(StopRepository):
    """Searches stops and stations by name."""

    def __init__(self, http_client: TransitHttpClient) -> None:
        """Initialize with an HTTP client."""
        self._http_client = http_client

    async def search_stops(self, query: str, results: int = 20) -> list[Stop]:
        """Search stops matching a query, best matches first.

        Locations that are not stops or stations (addresses, POIs) are dropped.
        Stops whose name contains more of the query words rank higher.
        """
        data = await self._http_client.get_json(
            "/locations",
            {"query": query, "results": results, "poi": "false", "addresses": "false"},
        )
        if isinstance(data, list):
            locations = data
        elif isinstance(data, dict):
            locations = data.get("locations") or []
        else:
            raise ValueError(f"Unexpected locations payload type: {type(data).__name__}")

        query_words = set(query.lower().split())
        ranked: list[tuple[int, Stop]] = []
        for location in locations:
            if not isinstance(location, dict):
                continue
            kind = location.get("type", "")
            if kind not in ("stop", "station"):
                continue
            name = location.get("name", "")
            relevance = sum(1 for word in query_words if word in name.lower())
            ranked.append((relevance, Stop(id=str(location.get("id", "")), name=name, kind=kind)))

        ranked.sort(key=lambda item: (-item[0], item[1].name))
        logger.debug(f"Stop search '{query}' returned {len(ranked)} stops")
        return [stop for _, stop in ranked]
