"""Broadcasters for LiveView re-render signals."""

from departure_board.adapters.web.broadcasters.state_broadcaster import (
    BOARD_UPDATE,
    StateBroadcaster,
)

__all__ = ["BOARD_UPDATE", "StateBroadcaster"]
