"""Domain models for the departure board."""

from departure_board.domain.models.board_entry import BoardEntry
from departure_board.domain.models.board_snapshot import BoardSnapshot
from departure_board.domain.models.departure import Departure
from departure_board.domain.models.stop import Stop
from departure_board.domain.models.sun_times import SunTimes
from departure_board.domain.models.theme import Theme
from departure_board.domain.models.viewport import Viewport

__all__ = [
    "BoardEntry",
    "BoardSnapshot",
    "Departure",
    "Stop",
    "SunTimes",
    "Theme",
    "Viewport",
]
