"""Protocols for adapter-side collaborators."""

from departure_board.domain.contracts.departure_formatter import DepartureFormatterProtocol
from departure_board.domain.contracts.state_broadcaster import StateBroadcasterProtocol
from departure_board.domain.contracts.static_file_server import StaticFileServerProtocol

__all__ = [
    "DepartureFormatterProtocol",
    "StateBroadcasterProtocol",
    "StaticFileServerProtocol",
]
