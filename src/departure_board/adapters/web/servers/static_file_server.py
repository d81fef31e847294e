"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, Response
from starlette.routing import Route
from starlette.staticfiles import StaticFiles

from departure_board.domain.contracts.static_file_server import StaticFileServerProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from pyview import PyView

logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, max-age=60, must-revalidate"


def find_static_directory() -> Path | None:
    """Locate the static directory (working directory first, then project root)."""
    candidates = [
        Path.cwd() / "static",
        Path(__file__).parents[5] / "static",
    ]
    for path in candidates:
        if path.exists():
            return path
    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(header[0].lower() == b"cache-control" for header in headers):
                    headers.append((b"cache-control", CACHE_CONTROL.encode()))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class StaticFileServer(StaticFileServerProtocol):
    """Serves the pyview client, stylesheets, hook script and line icons."""

    def __init__(self, static_path: Path | None = None) -> None:
        """Initialize with an optional explicit static directory."""
        self.static_path = static_path

    def register_routes(self, app: PyView) -> None:
        """Register static file routes with the PyView app.

        Args:
            app: The PyView application instance.
        """
        # Specific routes must precede the /static mount
        app.routes.insert(0, Route("/static/assets/app.js", self._serve_app_js))

        static_path = self.static_path or find_static_directory()
        if static_path is None:
            return

        app.mount("/static", StaticFileCacheApp(StaticFiles(directory=str(static_path))), name="static")
        logger.info(f"Mounted static files from {static_path} with 1-minute cache headers")

    async def _serve_app_js(self, _request: Any) -> Response:
        """Serve pyview's client JavaScript."""
        import pyview

        pyview_path = Path(pyview.__file__).parent
        for client_js_path in (
            pyview_path / "static" / "assets" / "app.js",
            pyview_path / "assets" / "js" / "app.js",
        ):
            if client_js_path.exists():
                response = FileResponse(str(client_js_path), media_type="application/javascript")
                response.headers["Cache-Control"] = CACHE_CONTROL
                return response

        logger.error(f"Could not find pyview client JS below {pyview_path}")
        return Response(
            content="// PyView client not found",
            media_type="application/javascript",
            status_code=404,
        )
