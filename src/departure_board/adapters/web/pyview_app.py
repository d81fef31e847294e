"""PyView web adapter for displaying the departure board."""

from __future__ import annotations

import logging
from typing import Any

from markupsafe import escape

from departure_board.adapters.config import AppConfig
from departure_board.domain.ports import DisplayAdapter
from departure_board.domain.ports.board_controller import (
    BoardControllerFactory,  # noqa: TC001 - Runtime dependency: called per socket
)

from .rate_limit_middleware import RateLimitMiddleware
from .servers import StaticFileServer
from .views.board import create_board_live_view

logger = logging.getLogger(__name__)


def build_head_markup(title: str) -> str:
    """Extra ``<head>`` content: favicon, stylesheet and the viewport hook.

    The hook script registers ``window.Hooks`` and must load before pyview's
    deferred client script.
    """
    return (
        '<link rel="icon" href="/favicon.svg" type="image/svg+xml">'
        '<link rel="stylesheet" href="/static/css/board.css">'
        '<script src="/static/js/viewport_gate.js"></script>'
        f'<meta name="application-name" content="{escape(title)}">'
    )


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter serving the board at ``/``."""

    def __init__(
        self,
        controller_factory: BoardControllerFactory,
        config: AppConfig,
    ) -> None:
        """Initialize the web adapter.

        Args:
            controller_factory: Creates one board controller per connected socket.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(controller_factory):
            raise TypeError("controller_factory must be callable")

        self.controller_factory = controller_factory
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Any:
        """Build the ASGI application."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.playground.favicon import generate_favicon_svg
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()

        favicon_svg = generate_favicon_svg(self.config.title, bg_color="#F0D722", text_color="#000000")

        async def favicon(_request: Any) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        app.routes.append(Route("/favicon.svg", favicon, methods=["GET"]))

        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup(build_head_markup(self.config.title)),
        )

        app.add_live_view("/", create_board_live_view(self.controller_factory, self.config))
        logger.info(f"Registered board for stop {self.config.stop_id} at '/'")

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        StaticFileServer().register_routes(app)

        return RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        server_config = uvicorn.Config(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level="info",
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving departure board on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
