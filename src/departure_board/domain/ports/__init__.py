"""Ports (interfaces) for the ports-and-adapters architecture."""

from departure_board.domain.ports.board_controller import BoardControllerPort
from departure_board.domain.ports.daylight_repository import DaylightRepository
from departure_board.domain.ports.departure_repository import DepartureRepository
from departure_board.domain.ports.display_adapter import DisplayAdapter
from departure_board.domain.ports.stop_repository import StopRepository
from departure_board.domain.ports.theme_strategy import ThemeStrategy

__all__ = [
    "BoardControllerPort",
    "DaylightRepository",
    "DepartureRepository",
    "DisplayAdapter",
    "StopRepository",
    "ThemeStrategy",
]
