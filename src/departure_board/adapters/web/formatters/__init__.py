"""Formatters for display values."""

from departure_board.adapters.web.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
