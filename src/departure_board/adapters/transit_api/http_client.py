"""HTTP client for the transport.rest API.

API documentation: https://v6.bvg.transport.rest/api.html
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from departure_board.adapters.api_rate_limiter import TRANSIT_API, ApiRateLimiter
from departure_board.adapters.api_request_logger import log_api_request
from departure_board.adapters.transit_api.errors import TransitApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransitHttpClient:
    """Thin JSON client for transport.rest endpoints."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = "https://v6.bvg.transport.rest",
        timeout_seconds: int = 10,
        min_delay_seconds: float = 0.5,
    ) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            base_url: Base URL of the transport.rest deployment.
            timeout_seconds: Total timeout per request.
            min_delay_seconds: Minimum delay between two requests to the API.
        """
        self._session = session
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                TRANSIT_API, self._min_delay_seconds
            )
        return self._rate_limiter

    async def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a path below the base URL and return the decoded JSON body.

        Raises:
            TransitApiError: If the API answers with a non-200 status.
        """
        url = f"{self.base_url}{path}"
        rate_limiter = await self._get_rate_limiter()
        await rate_limiter.acquire()
        log_api_request("GET", url, params)

        async with self._session.get(url, params=params, timeout=self._timeout) as response:
            if response.status != 200:
                raise TransitApiError(response.status, await response.text())
            return await response.json()
