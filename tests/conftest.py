"""Shared fixtures."""

import pytest

from departure_board.adapters.api_rate_limiter import ApiRateLimiter


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Give every test fresh request spacing per API."""
    ApiRateLimiter._instances.clear()
    ApiRateLimiter._registry_lock = None
