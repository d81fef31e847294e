"""Viewport domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """Browser viewport geometry as reported by the client."""

    width: float
    height: float

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height, zero for a degenerate viewport."""
        if self.height <= 0:
            return 0.0
        return self.width / self.height

    def is_supported(self, min_aspect_ratio: float) -> bool:
        """Whether the board can be rendered in this viewport."""
        return self.height > 0 and self.aspect_ratio >= min_aspect_ratio
