"""Protocol for broadcasting board re-render signals."""

from typing import Protocol


class StateBroadcasterProtocol(Protocol):
    """Protocol for signalling LiveView sockets that their board changed."""

    async def broadcast_update(self, topic: str) -> bool:
        """Send an update signal to every subscriber of the topic.

        Args:
            topic: The pub/sub topic of the board that changed.

        Returns:
            Whether the signal was sent.
        """
        ...
