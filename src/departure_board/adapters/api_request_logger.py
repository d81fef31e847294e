"""Logging of outgoing API requests, enabled by DEPARTURE_BOARD_LOG_REQUESTS."""

import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check whether request logging is switched on via the environment."""
    return os.getenv("DEPARTURE_BOARD_LOG_REQUESTS", "").lower() == "true"


def build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build the full URL with sorted query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log an outgoing request if request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
    """
    if not should_log_requests():
        return
    logger.info(f"API Request: {method} {build_url_with_params(url, params)}")
