"""Builder turning board state into template variables."""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from departure_board.adapters.web.formatters import DepartureFormatter
    from departure_board.adapters.web.state import BoardState
    from departure_board.domain.models.board_entry import BoardEntry

logger = logging.getLogger(__name__)


def dom_id_for(departure_id: str) -> str:
    """Stable DOM id for a trip id.

    Trip ids contain characters such as ``|`` that are awkward in selectors,
    so the id is hashed.
    """
    digest = hashlib.sha1(departure_id.encode("utf-8")).hexdigest()[:16]
    return f"departure-{digest}"


class TemplateDataBuilder:
    """Builds the assigns rendered by the board template."""

    def __init__(self, formatter: DepartureFormatter) -> None:
        """Initialize with the formatter for time labels."""
        self.formatter = formatter

    def build_entry(self, entry: BoardEntry) -> dict[str, Any]:
        """Build the template variables of one board row."""
        departure = entry.departure
        css_classes = ["departure"]
        if entry.fading:
            css_classes.append("fade")
        if departure.is_cancelled:
            css_classes.append("cancelled")

        return {
            "id": departure.id,
            "dom_id": dom_id_for(departure.id),
            "css_class": " ".join(css_classes),
            "icon_src": self.formatter.icon_path(departure.line_type),
            "icon_alt": f"{departure.line_type} icon",
            "line_name": departure.line_name,
            "destination": departure.destination,
            "is_now": departure.is_now,
            "time_class": "departure-time now" if departure.is_now else "departure-time",
            "time_label": self.formatter.format_minutes(departure),
            "clock_time": self.formatter.format_clock_time(departure),
        }

    def build(self, state: BoardState) -> dict[str, Any]:
        """Build all template variables for a board state."""
        entries = [self.build_entry(entry) for entry in state.entries]
        return {
            "theme": state.theme or "light",
            "has_error": state.error_message is not None,
            "error_message": state.error_message or "",
            "entries": entries,
            "api_status": state.api_status or "unknown",
            "update_time": self.formatter.format_update_time(state.last_update),
        }
