"""Board controller port."""

from collections.abc import Awaitable, Callable
from typing import Protocol

from departure_board.domain.models.board_snapshot import BoardSnapshot

ChangeListener = Callable[[], Awaitable[None]]


class BoardControllerPort(Protocol):
    """Port for the per-client board controller driven by the display adapter."""

    async def start(self) -> None:
        """Start the periodic refresh loop."""
        ...

    async def stop(self) -> None:
        """Stop all background work of the controller."""
        ...

    def report_viewport(self, width: float, height: float) -> None:
        """Report a viewport geometry change (debounced)."""
        ...

    def snapshot(self) -> BoardSnapshot:
        """Return the current board state for rendering."""
        ...


BoardControllerFactory = Callable[[ChangeListener], BoardControllerPort]
