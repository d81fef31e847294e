"""Errors raised by the transit API adapters."""


class TransitApiError(RuntimeError):
    """Raised when the transit API answers with a non-success status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Transit API returned status {status}: {body[:200]}")
        self.status = status
        self.body = body
