"""Stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stop:
    """A stop or station returned by a location search."""

    id: str
    name: str
    kind: str  # "stop" or "station"
