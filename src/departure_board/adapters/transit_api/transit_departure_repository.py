"""transport.rest departure repository adapter."""

import logging

from departure_board.adapters.transit_api.departure_parser import DepartureParser
from departure_board.adapters.transit_api.http_client import TransitHttpClient
from departure_board.domain.models.departure import Departure
from departure_board.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class TransitDepartureRepository(DepartureRepository):
    """Fetches upcoming departures at a stop from transport.rest."""

    def __init__(
        self, http_client: TransitHttpClient, parser: DepartureParser | None = None
    ) -> None:
        """Initialize with an HTTP client and an optional parser."""
        self._http_client = http_client
        self._parser = parser or DepartureParser()

    async def get_departures(
        self,
        stop_id: str,
        results: int = 6,
        duration_minutes: int = 120,
    ) -> list[Departure]:
        """Get departures for a stop.

        Args:
            stop_id: transport.rest stop id (e.g. "900000181503").
            results: Number of departures to request.
            duration_minutes: How far ahead to look.

        Returns:
            Departures in API order.
        """
        params = {"duration": duration_minutes, "results": results}
        try:
            data = await self._http_client.get_json(f"/stops/{stop_id}/departures", params)
        except Exception as e:
            logger.error(f"Error fetching departures for stop '{stop_id}': {e}")
            raise

        departures = self._parser.parse_departures(data)
        logger.debug(f"Fetched {len(departures)} departures for stop '{stop_id}'")
        return departures
