"""Departure board for a single BVG/VBB stop."""

__version__ = "0.1.0"
