"""Domain layer - core models and ports."""

from departure_board.domain.models import (
    BoardEntry,
    Departure,
    SunTimes,
    Theme,
    Viewport,
)
from departure_board.domain.ports import (
    BoardControllerPort,
    DaylightRepository,
    DepartureRepository,
    DisplayAdapter,
    ThemeStrategy,
)

__all__ = [
    "BoardControllerPort",
    "BoardEntry",
    "DaylightRepository",
    "Departure",
    "DepartureRepository",
    "DisplayAdapter",
    "SunTimes",
    "Theme",
    "ThemeStrategy",
    "Viewport",
]
