"""Rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)


def extract_client_ip(request: Request) -> str:
    """Extract the client IP, honouring the first X-Forwarded-For entry."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware enforcing a per-IP request quota.

    A quota of zero or less disables rate limiting.
    """

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Maximum number of requests allowed per IP per minute.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.quota = None
        self.rate_limiter_store = store.MemoryStore()
        if requests_per_minute > 0:
            self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
            logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")
        else:
            logger.info("Rate limiting disabled")

    @staticmethod
    def _extract_retry_after(result: Any) -> float:
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None)
        if retry_after is None:
            retry_after = getattr(result, "retry_after", None)
        return float(retry_after) if retry_after is not None else 60.0

    def _create_rate_limit_response(self, client_ip: str, retry_after: float) -> Response:
        logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after}s")
        return Response(
            content="Rate limit exceeded. Please try again later.",
            status_code=429,
            headers={"Retry-After": str(int(retry_after))},
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 when the client exhausted its quota."""
        if self.quota is None:
            return await call_next(request)

        client_ip = extract_client_ip(request)
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )

        result = throttle.limit()
        if result.limited:
            return self._create_rate_limit_response(client_ip, self._extract_retry_after(result))

        response: Response = await call_next(request)
        return response
