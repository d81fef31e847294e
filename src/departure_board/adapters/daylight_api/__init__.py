"""Sunrise/sunset API adapters."""

from departure_board.adapters.daylight_api.sunrise_sunset_repository import (
    SunriseSunsetRepository,
    parse_time_of_day,
)

__all__ = ["SunriseSunsetRepository", "parse_time_of_day"]
