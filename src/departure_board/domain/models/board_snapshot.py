"""Board snapshot domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from departure_board.domain.models.board_entry import BoardEntry
from departure_board.domain.models.theme import Theme


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of a board controller used for rendering."""

    entries: list[BoardEntry] = field(default_factory=list)
    error_message: str | None = None
    theme: Theme | None = None
    api_status: str = "unknown"
    last_update: datetime | None = None
