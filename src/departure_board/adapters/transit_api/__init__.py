"""transport.rest adapters for BVG/VBB departures and stop search."""

from departure_board.adapters.transit_api.departure_parser import DepartureParser
from departure_board.adapters.transit_api.errors import TransitApiError
from departure_board.adapters.transit_api.http_client import TransitHttpClient
from departure_board.adapters.transit_api.transit_departure_repository import (
    TransitDepartureRepository,
)
from departure_board.adapters.transit_api.transit_stop_repository import TransitStopRepository

__all__ = [
    "DepartureParser",
    "TransitApiError",
    "TransitDepartureRepository",
    "TransitHttpClient",
    "TransitStopRepository",
]
