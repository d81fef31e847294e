"""Theme strategy port."""

from typing import Protocol

from departure_board.domain.models.theme import Theme


class ThemeStrategy(Protocol):
    """Port for deciding which theme the board should currently use."""

    async def resolve(self) -> Theme:
        """Return the theme for the current moment."""
        ...
