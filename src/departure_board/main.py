"""Main entry point for the departure board application."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from departure_board.adapters.config import AppConfig
from departure_board.adapters.daylight_api import SunriseSunsetRepository
from departure_board.adapters.transit_api import TransitDepartureRepository, TransitHttpClient
from departure_board.adapters.web import PyViewWebAdapter
from departure_board.application.services import (
    BoardController,
    BoardSettings,
    DaylightThemeStrategy,
)
from departure_board.domain.models import Theme
from departure_board.domain.ports.board_controller import BoardControllerFactory, ChangeListener

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def build_board_settings(config: AppConfig) -> BoardSettings:
    """Translate application configuration into board settings."""
    default_theme = Theme.LIGHT if config.uses_daylight_theme else Theme(config.theme)
    return BoardSettings(
        stop_id=config.stop_id,
        result_count=config.result_count,
        duration_minutes=config.departure_duration_minutes,
        refresh_interval_seconds=config.refresh_interval_seconds,
        fade_seconds=config.fade_seconds,
        min_aspect_ratio=config.min_aspect_ratio,
        viewport_debounce_seconds=config.viewport_debounce_seconds,
        default_theme=default_theme,
    )


def build_controller_factory(
    config: AppConfig, session: aiohttp.ClientSession
) -> BoardControllerFactory:
    """Wire repositories and the optional daylight theme into a controller factory."""
    http_client = TransitHttpClient(
        session,
        base_url=config.transit_api_base_url,
        timeout_seconds=config.api_timeout_seconds,
        min_delay_seconds=config.api_min_delay_seconds,
    )
    departure_repo = TransitDepartureRepository(http_client)
    settings = build_board_settings(config)

    theme_strategy = None
    if config.uses_daylight_theme:
        theme_strategy = DaylightThemeStrategy(
            SunriseSunsetRepository(
                session,
                api_url=config.daylight_api_url,
                timeout_seconds=config.api_timeout_seconds,
                min_delay_seconds=config.api_min_delay_seconds,
            ),
            latitude=config.latitude,
            longitude=config.longitude,
            timezone=config.timezone,
        )
        logger.info(
            f"Daylight theme enabled for {config.latitude},{config.longitude} ({config.timezone})"
        )

    def create_controller(on_change: ChangeListener) -> BoardController:
        return BoardController(departure_repo, settings, on_change, theme_strategy)

    return create_controller


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
        config.load_config_file()
    except (ValidationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Showing {config.result_count} departures for stop {config.stop_id}, "
        f"refreshing every {config.refresh_interval_seconds}s"
    )

    async with aiohttp.ClientSession() as session:
        display_adapter = PyViewWebAdapter(build_controller_factory(config, session), config)
        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
