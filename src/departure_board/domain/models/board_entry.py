"""Board entry domain model."""

from dataclasses import dataclass

from departure_board.domain.models.departure import Departure


@dataclass
class BoardEntry:
    """A row currently shown on the board.

    The entry keeps the latest departure seen for its trip id. ``fading`` is set
    while the row is animating out and cleared again if the trip reappears.
    """

    departure: Departure
    fading: bool = False

    @property
    def id(self) -> str:
        """Trip identifier of the row."""
        return self.departure.id
