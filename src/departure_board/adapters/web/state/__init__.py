"""State held in the LiveView socket context."""

from departure_board.adapters.web.state.board_state import BoardState

__all__ = ["BoardState"]
