"""Board LiveView for displaying departures at one stop."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any, ClassVar

from pyview import LiveView, LiveViewSocket, is_connected
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from departure_board.adapters.config import AppConfig
from departure_board.adapters.web.broadcasters import BOARD_UPDATE, StateBroadcaster
from departure_board.adapters.web.builders import TemplateDataBuilder
from departure_board.adapters.web.formatters import DepartureFormatter
from departure_board.adapters.web.state import BoardState
from departure_board.domain.contracts import StateBroadcasterProtocol
from departure_board.domain.ports.board_controller import (
    BoardControllerFactory,
    BoardControllerPort,
)

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).parent / "board.html"


def parse_viewport_payload(payload: Any) -> tuple[float, float] | None:
    """Extract ``(width, height)`` from a viewport event payload."""
    if not isinstance(payload, dict):
        return None
    try:
        return float(payload["width"]), float(payload["height"])
    except (KeyError, TypeError, ValueError):
        return None


class BoardLiveView(LiveView[BoardState]):
    """LiveView showing the departure board.

    Every connected socket gets its own board controller. The controller
    signals changes on a socket-specific pubsub topic; ``handle_info`` then
    copies the controller snapshot into the socket context for rendering.
    """

    _template: ClassVar[Any] = None

    def __init__(
        self,
        controller_factory: BoardControllerFactory,
        config: AppConfig,
        broadcaster: StateBroadcasterProtocol | None = None,
    ) -> None:
        """Initialize the LiveView.

        Args:
            controller_factory: Creates a board controller for a change listener.
            config: Application configuration.
            broadcaster: Broadcaster used to signal re-renders.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(controller_factory):
            raise TypeError("controller_factory must be callable")

        self.controller_factory = controller_factory
        self.config = config
        self.broadcaster = broadcaster or StateBroadcaster()
        self.formatter = DepartureFormatter(config.timezone)
        self.template_data_builder = TemplateDataBuilder(self.formatter)
        self.controllers: dict[LiveViewSocket[BoardState], BoardControllerPort] = {}

    def _initial_theme(self) -> str:
        # The daylight theme starts light until the first check resolves it
        return "light" if self.config.uses_daylight_theme else self.config.theme

    async def mount(self, socket: LiveViewSocket[BoardState], _session: dict) -> None:
        """Mount the LiveView and create the board controller for connected sockets."""
        socket.context = BoardState(theme=self._initial_theme())

        if not is_connected(socket):
            return

        topic = f"board:{uuid.uuid4()}"
        socket.context.topic = topic

        async def on_change() -> None:
            await self.broadcaster.broadcast_update(topic)

        controller = self.controller_factory(on_change)
        self.controllers[socket] = controller

        try:
            await socket.subscribe(topic)
            logger.info(f"Subscribed socket to board topic: {topic}")
        except Exception as e:
            logger.error(f"Failed to subscribe to topic {topic}: {e}", exc_info=True)

        await controller.start()

    async def handle_event(
        self, event: str, payload: dict[str, Any], socket: LiveViewSocket[BoardState]
    ) -> None:
        """Handle events pushed by the viewport hook."""
        if event != "viewport":
            logger.debug(f"Ignoring unknown event '{event}'")
            return

        controller = self.controllers.get(socket)
        if controller is None:
            logger.warning("Viewport event for a socket without board controller")
            return

        viewport = parse_viewport_payload(payload)
        if viewport is None:
            logger.warning(f"Malformed viewport payload: {payload}")
            return

        controller.report_viewport(*viewport)

    def _update_context_from_controller(self, socket: LiveViewSocket[BoardState]) -> None:
        """Copy the controller's current board into the socket context."""
        controller = self.controllers.get(socket)
        if controller is None:
            return
        socket.context.apply_snapshot(controller.snapshot())

    async def handle_info(self, event: str | InfoEvent, socket: LiveViewSocket[BoardState]) -> None:
        """Handle re-render signals from the board controller."""
        payload = event.payload if isinstance(event, InfoEvent) else event
        if payload == BOARD_UPDATE:
            self._update_context_from_controller(socket)
            return
        logger.debug(f"Received unexpected info payload: {payload}")

    async def _release(self, socket: LiveViewSocket[BoardState]) -> None:
        controller = self.controllers.pop(socket, None)
        if controller is not None:
            await controller.stop()

    async def unmount(self, socket: LiveViewSocket[BoardState]) -> None:
        """Stop the socket's board controller."""
        await self._release(socket)

    async def disconnect(self, socket: LiveViewSocket[BoardState]) -> None:
        """Stop the socket's board controller when the connection drops."""
        await self._release(socket)

    @classmethod
    def _load_template(cls) -> Any:
        if cls._template is None:
            cls._template = ibis.Template(TEMPLATE_PATH.read_text(encoding="utf-8"))
        return cls._template

    async def render(self, assigns: BoardState | dict, meta: Any) -> Any:
        """Render the board template."""
        state = assigns if isinstance(assigns, BoardState) else BoardState()
        template_assigns = self.template_data_builder.build(state)
        live_template = LiveTemplate(self._load_template())
        return LiveRender(live_template, template_assigns, meta)


def create_board_live_view(
    controller_factory: BoardControllerFactory,
    config: AppConfig,
) -> type[BoardLiveView]:
    """Create a configured BoardLiveView class.

    PyView's add_live_view expects a class, so the collaborators are captured
    in a subclass.
    """
    captured_factory = controller_factory
    captured_config = config

    class ConfiguredBoardLiveView(BoardLiveView):
        """Board LiveView bound to the application's controller factory."""

        def __init__(self) -> None:
            super().__init__(captured_factory, captured_config)

    return ConfiguredBoardLiveView
