"""Board state dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from departure_board.domain.models.board_entry import BoardEntry
from departure_board.domain.models.board_snapshot import BoardSnapshot


@dataclass
class BoardState:
    """State for the board LiveView."""

    entries: list[BoardEntry] = field(default_factory=list)
    error_message: str | None = None
    theme: str = "light"
    api_status: str = "unknown"
    last_update: datetime | None = None
    topic: str | None = None  # Per-socket pubsub topic, set once connected

    def apply_snapshot(self, snapshot: BoardSnapshot) -> None:
        """Copy a controller snapshot into this state."""
        self.entries = snapshot.entries
        self.error_message = snapshot.error_message
        if snapshot.theme is not None:
            self.theme = snapshot.theme.value
        self.api_status = snapshot.api_status
        self.last_update = snapshot.last_update
