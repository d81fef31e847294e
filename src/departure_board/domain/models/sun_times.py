"""Sunrise/sunset domain model."""

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class SunTimes:
    """Local sunrise and sunset time of day for a fixed coordinate."""

    sunrise: time
    sunset: time

    def is_daytime(self, now: time) -> bool:
        """Whether ``now`` lies between sunrise (inclusive) and sunset (exclusive)."""
        return self.sunrise <= now < self.sunset
