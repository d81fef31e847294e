"""Servers for static assets."""

from departure_board.adapters.web.servers.static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]
