"""Per-client controller driving the viewport gate, refresh loop and fade-out."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from departure_board.application.services.board_reconciler import DepartureBoard
from departure_board.application.services.debouncer import Debouncer
from departure_board.domain.models.board_entry import BoardEntry
from departure_board.domain.models.board_snapshot import BoardSnapshot
from departure_board.domain.models.theme import Theme
from departure_board.domain.models.viewport import Viewport

if TYPE_CHECKING:
    from departure_board.domain.models.departure import Departure
    from departure_board.domain.ports.board_controller import ChangeListener
    from departure_board.domain.ports.departure_repository import DepartureRepository
    from departure_board.domain.ports.theme_strategy import ThemeStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardSettings:
    """Settings shared by every board controller."""

    stop_id: str
    result_count: int = 6
    duration_minutes: int = 120
    refresh_interval_seconds: float = 30.0
    fade_seconds: float = 1.0
    min_aspect_ratio: float = 1.2
    viewport_debounce_seconds: float = 0.5
    default_theme: Theme = Theme.LIGHT

    @property
    def viewport_error_message(self) -> str:
        """Message shown while the viewport is not supported."""
        return (
            f"Only viewports with aspect ratios bigger than {self.min_aspect_ratio:g} "
            "are supported"
        )


class BoardController:
    """Owns the board state of one connected client.

    The controller is created once per client and handed to the gate check,
    the refresh loop and the renderer. It never touches the display directly;
    after every visible change it awaits ``on_change`` so the display adapter
    can re-render.
    """

    def __init__(
        self,
        departure_repository: DepartureRepository,
        settings: BoardSettings,
        on_change: ChangeListener,
        theme_strategy: ThemeStrategy | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            departure_repository: Source of departures for the stop.
            settings: Board settings.
            on_change: Awaited after every change that should be re-rendered.
            theme_strategy: Optional strategy deciding the theme on each refresh.
        """
        self._departure_repository = departure_repository
        self.settings = settings
        self._on_change = on_change
        self._theme_strategy = theme_strategy
        self._board = DepartureBoard(settings.result_count)
        self._viewport_debouncer = Debouncer(
            settings.viewport_debounce_seconds, self.check_viewport
        )
        # None until the client reported its viewport for the first time
        self.gate_valid: bool | None = None
        self.error_message: str | None = None
        self.theme: Theme = settings.default_theme
        self.api_status = "unknown"
        self.last_update: datetime | None = None
        self._refresh_task: asyncio.Task | None = None
        self._removal_task: asyncio.Task | None = None

    @property
    def board(self) -> DepartureBoard:
        """The reconciled rows of this client."""
        return self._board

    async def start(self) -> None:
        """Start the periodic refresh loop."""
        if self._refresh_task is not None and not self._refresh_task.done():
            logger.warning("Board refresh loop already running")
            return
        self._refresh_task = asyncio.create_task(self._refresh_loop())
        logger.info(
            f"Started board refresh loop for stop {self.settings.stop_id} "
            f"every {self.settings.refresh_interval_seconds}s"
        )

    async def stop(self) -> None:
        """Stop the refresh loop, pending fade-outs and debounced viewport checks."""
        self._viewport_debouncer.cancel()
        await self._viewport_debouncer.drain()
        for task in (self._refresh_task, self._removal_task):
            if task is not None and not task.done():
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        self._refresh_task = None
        self._removal_task = None
        logger.info("Stopped board controller")

    def report_viewport(self, width: float, height: float) -> None:
        """Report a viewport change; bursts are collapsed by the debouncer."""
        self._viewport_debouncer(width, height)

    async def check_viewport(self, width: float, height: float) -> None:
        """Evaluate the viewport gate.

        An unsupported viewport clears the board and shows the error message.
        Becoming valid again resets the content and refreshes immediately.
        """
        viewport = Viewport(width=width, height=height)
        if not viewport.is_supported(self.settings.min_aspect_ratio):
            logger.info(
                f"Viewport {width:g}x{height:g} (ratio {viewport.aspect_ratio:.2f}) "
                "not supported, pausing board"
            )
            self._clear()
            self.error_message = self.settings.viewport_error_message
            self.gate_valid = False
            await self._notify()
            return

        if not self.gate_valid:
            logger.info(f"Viewport {width:g}x{height:g} supported, resetting board")
            self.gate_valid = True
            self._clear()
            await self._notify()
            await self.refresh()

    async def refresh(self) -> None:
        """Run one fetch and render cycle.

        Does nothing while the viewport gate is not valid. Fetch errors are
        recorded in ``api_status`` and re-raised.
        """
        if not self.gate_valid:
            return

        try:
            if self._theme_strategy is None:
                departures = await self._fetch_departures()
            else:
                departures, self.theme = await asyncio.gather(
                    self._fetch_departures(), self._resolve_theme()
                )
        except Exception:
            self.api_status = "error"
            await self._notify()
            raise

        if not self.gate_valid:
            # The viewport became unsupported while fetching; the error stays on screen
            logger.debug("Discarding departures fetched before the viewport became unsupported")
            return

        self._board.reconcile(departures)
        self.api_status = "success"
        self.last_update = datetime.now(UTC)
        await self._notify()

        if self._board.has_excess():
            self._schedule_removal()

    def snapshot(self) -> BoardSnapshot:
        """Return a copy of the current board state for rendering."""
        return BoardSnapshot(
            entries=[
                BoardEntry(departure=entry.departure, fading=entry.fading)
                for entry in self._board.entries
            ],
            error_message=self.error_message,
            theme=self.theme,
            api_status=self.api_status,
            last_update=self.last_update,
        )

    async def _fetch_departures(self) -> list[Departure]:
        return await self._departure_repository.get_departures(
            self.settings.stop_id,
            results=self.settings.result_count,
            duration_minutes=self.settings.duration_minutes,
        )

    async def _resolve_theme(self) -> Theme:
        if self._theme_strategy is None:
            return self.theme
        try:
            return await self._theme_strategy.resolve()
        except Exception as e:
            logger.warning(f"Daylight check failed, keeping {self.theme.value} theme: {e}")
            return self.theme

    async def _refresh_loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self.settings.refresh_interval_seconds)
                try:
                    await self.refresh()
                except Exception as e:
                    logger.error(
                        f"Failed to refresh departures for stop {self.settings.stop_id}: {e}"
                    )
        except asyncio.CancelledError:
            logger.info("Board refresh loop cancelled")
            raise

    def _schedule_removal(self) -> None:
        if self._removal_task is None or self._removal_task.done():
            self._removal_task = asyncio.create_task(self._remove_outdated())

    async def _remove_outdated(self) -> None:
        """Fade out the oldest rows one at a time until the target count is reached."""
        while (entry := self._board.begin_fade()) is not None:
            await self._notify()
            await asyncio.sleep(self.settings.fade_seconds)
            if self._board.detach(entry):
                logger.debug(f"Removed stale departure {entry.id}")
            await self._notify()

    def _clear(self) -> None:
        if self._removal_task is not None and not self._removal_task.done():
            self._removal_task.cancel()
        self._removal_task = None
        self._board.clear()
        self.error_message = None

    async def _notify(self) -> None:
        await self._on_change()
