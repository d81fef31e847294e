"""Application services for the departure board."""

from departure_board.application.services.board_controller import BoardController, BoardSettings
from departure_board.application.services.board_reconciler import DepartureBoard
from departure_board.application.services.debouncer import Debouncer
from departure_board.application.services.theme import DaylightThemeStrategy

__all__ = [
    "BoardController",
    "BoardSettings",
    "DaylightThemeStrategy",
    "Debouncer",
    "DepartureBoard",
]
