"""Web adapters for displaying the departure board."""

from departure_board.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
