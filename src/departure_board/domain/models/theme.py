"""Theme domain model."""

from enum import Enum


class Theme(str, Enum):
    """Presentation theme applied to the board."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"  # Follows the browser's color scheme preference
