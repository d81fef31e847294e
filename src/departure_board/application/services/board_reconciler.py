"""Reconciliation of fetched departures against the rows on the board."""

import logging

from departure_board.domain.models.board_entry import BoardEntry
from departure_board.domain.models.departure import Departure

logger = logging.getLogger(__name__)


class DepartureBoard:
    """Keeps the rows shown on the board in sync with fetched departures.

    Rows are keyed by trip id and kept in display order: the first row is the
    oldest one, i.e. the one that has gone the longest without being refreshed.
    """

    def __init__(self, target_count: int) -> None:
        """Initialize an empty board.

        Args:
            target_count: Number of rows the board settles on once stale rows
                have faded out.
        """
        if target_count < 1:
            raise ValueError("target_count must be at least 1")
        self.target_count = target_count
        # dicts keep insertion order, which doubles as display order
        self._entries: dict[str, BoardEntry] = {}

    @property
    def entries(self) -> list[BoardEntry]:
        """Rows in display order, including rows that are fading out."""
        return list(self._entries.values())

    @property
    def active_count(self) -> int:
        """Number of rows that are not fading out."""
        return sum(1 for entry in self._entries.values() if not entry.fading)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Drop every row without animation."""
        self._entries.clear()

    def reconcile(self, departures: list[Departure]) -> None:
        """Apply a freshly fetched batch of departures.

        Known trips are updated in place and moved to the end of the display
        order, unknown trips get a new row appended. A trip that reappears while
        fading out is revived.
        """
        created = 0
        for departure in departures:
            entry = self._entries.pop(departure.id, None)
            if entry is None:
                entry = BoardEntry(departure=departure)
                created += 1
            else:
                entry.departure = departure
                entry.fading = False
            self._entries[departure.id] = entry

        logger.debug(
            f"Reconciled {len(departures)} departures: {created} new, "
            f"{len(self._entries)} rows on board"
        )

    def has_excess(self) -> bool:
        """Whether more rows are active than the target count allows."""
        return self.active_count > self.target_count

    def begin_fade(self) -> BoardEntry | None:
        """Mark the oldest active row as fading if the board has excess rows.

        Returns:
            The row that started fading, or None if the board is at or below
            its target count.
        """
        if not self.has_excess():
            return None
        oldest = next(entry for entry in self._entries.values() if not entry.fading)
        oldest.fading = True
        return oldest

    def detach(self, entry: BoardEntry) -> bool:
        """Remove a row whose fade completed.

        The row is only removed if it is still on the board and still fading;
        a row revived by a newer batch stays.

        Returns:
            True if the row was removed.
        """
        current = self._entries.get(entry.id)
        if current is not entry or not entry.fading:
            return False
        del self._entries[entry.id]
        return True
