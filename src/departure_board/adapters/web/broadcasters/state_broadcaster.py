"""Re-render signals from board controllers to their LiveView sockets."""

from __future__ import annotations

import logging
from typing import Any

from pyview.live_socket import pub_sub_hub
from pyview.vendor.flet.pubsub import PubSub

from departure_board.domain.contracts.state_broadcaster import StateBroadcasterProtocol

logger = logging.getLogger(__name__)

# Info payload the board LiveView reacts to
BOARD_UPDATE = "update"


class StateBroadcaster(StateBroadcasterProtocol):
    """Publishes ``BOARD_UPDATE`` on per-socket board topics.

    All controllers of the process publish through one pubsub session on the
    given hub (pyview's global hub by default).
    """

    def __init__(self, hub: Any = None, session_id: str = "board-controllers") -> None:
        self._hub = hub if hub is not None else pub_sub_hub
        self._session_id = session_id
        self._pubsub: PubSub | None = None

    def _get_pubsub(self) -> PubSub:
        if self._pubsub is None:
            self._pubsub = PubSub(self._hub, self._session_id)
        return self._pubsub

    async def broadcast_update(self, topic: str) -> bool:
        """Signal the socket subscribed to ``topic`` that its board changed.

        A failing socket must not stop the controller that triggered the
        signal, so errors are logged and reported as ``False``.
        """
        try:
            await self._get_pubsub().send_all_on_topic_async(topic, BOARD_UPDATE)
        except Exception as e:
            logger.error(f"Failed to signal board topic {topic}: {e}", exc_info=True)
            return False
        logger.debug(f"Signalled board topic {topic}")
        return True
