"""Board LiveView."""

from departure_board.adapters.web.views.board.board import (
    BoardLiveView,
    create_board_live_view,
)

__all__ = ["BoardLiveView", "create_board_live_view"]
