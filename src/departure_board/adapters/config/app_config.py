"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Keys accepted in each TOML section, mapped to the AppConfig field they set
_TOML_SECTIONS: dict[str, dict[str, str]] = {
    "board": {
        "title": "title",
        "stop_id": "stop_id",
        "result_count": "result_count",
        "departure_duration_minutes": "departure_duration_minutes",
        "refresh_interval_seconds": "refresh_interval_seconds",
        "fade_seconds": "fade_seconds",
        "min_aspect_ratio": "min_aspect_ratio",
        "viewport_debounce_seconds": "viewport_debounce_seconds",
        "theme": "theme",
        "timezone": "timezone",
    },
    "daylight": {
        "api_url": "daylight_api_url",
        "latitude": "latitude",
        "longitude": "longitude",
    },
    "api": {
        "base_url": "transit_api_base_url",
        "timeout_seconds": "api_timeout_seconds",
        "min_delay_seconds": "api_min_delay_seconds",
    },
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    reload: bool = Field(default=False, description="Enable auto-reload for development")
    title: str = Field(default="Departures", description="Page title displayed in browser tab")

    # Transit API configuration
    transit_api_base_url: str = Field(
        default="https://v6.bvg.transport.rest",
        description="Base URL of the transport.rest API",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for upstream API requests in seconds"
    )
    api_min_delay_seconds: float = Field(
        default=0.5,
        description="Minimum delay between two requests to the same upstream API",
    )

    # Board configuration
    stop_id: str = Field(default="900000181503", description="Stop to show departures for")
    result_count: int = Field(
        default=6, description="Number of departures requested and kept on the board"
    )
    departure_duration_minutes: int = Field(
        default=120, description="How far ahead to look for departures in minutes"
    )
    refresh_interval_seconds: int = Field(
        default=30, description="Interval between departure updates in seconds"
    )
    fade_seconds: float = Field(
        default=1.0, description="Duration of the fade-out before a stale row is removed"
    )
    min_aspect_ratio: float = Field(
        default=1.2, description="Smallest viewport width/height ratio the board renders in"
    )
    viewport_debounce_seconds: float = Field(
        default=0.5, description="Quiet window for collapsing viewport resize reports"
    )
    theme: str = Field(
        default="light",
        description="UI theme: 'light', 'dark', 'auto' (follows system) or 'daylight'",
    )
    timezone: str = Field(
        default="Europe/Berlin",
        description="Timezone for clock times and the daylight check (IANA name)",
    )

    # Daylight theme configuration
    daylight_api_url: str = Field(
        default="https://api.sunrisesunset.io/json",
        description="Sunrise/sunset API returning local times of day",
    )
    latitude: float = Field(default=52.5200, description="Latitude for the daylight check")
    longitude: float = Field(default=13.4050, description="Longitude for the daylight check")

    # Rate limiting configuration
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute",
    )

    # Optional TOML config file with [board], [daylight] and [api] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding board settings",
    )

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v: str) -> str:
        """Validate theme is one of 'light', 'dark', 'auto' or 'daylight'."""
        if v.lower() not in ("light", "dark", "auto", "daylight"):
            raise ValueError("theme must be one of 'light', 'dark', 'auto' or 'daylight'")
        return v.lower()

    @field_validator(
        "result_count",
        "departure_duration_minutes",
        "refresh_interval_seconds",
        "api_timeout_seconds",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and intervals are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("min_aspect_ratio")
    @classmethod
    def validate_aspect_ratio(cls, v: float) -> float:
        """Validate the aspect ratio threshold is positive."""
        if v <= 0:
            raise ValueError("min_aspect_ratio must be positive")
        return v

    @property
    def uses_daylight_theme(self) -> bool:
        """Whether the theme follows sunrise and sunset."""
        return self.theme == "daylight"

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings on top of env configuration.

        Returns:
            The parsed TOML data, or an empty dict when no file is configured.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section_name, keys in _TOML_SECTIONS.items():
            section = toml_data.get(section_name)
            if section is None:
                continue
            if not isinstance(section, dict):
                raise ValueError(f"TOML config '{section_name}' must be a table")
            for key, field_name in keys.items():
                if key in section:
                    setattr(self, field_name, section[key])

        return toml_data
