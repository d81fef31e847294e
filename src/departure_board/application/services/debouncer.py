"""Timer-based debouncing of async actions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)


class Debouncer:
    """Collapses bursts of calls into a leading and at most one trailing call.

    The first call after a quiet period runs the action immediately. Calls
    arriving while the window is open restart the window; once it stays quiet
    for ``delay_seconds`` the action runs once more with the latest arguments.
    """

    def __init__(self, delay_seconds: float, action: Callable[..., Awaitable[Any]]) -> None:
        """Initialize the debouncer.

        Args:
            delay_seconds: Length of the quiet window.
            action: Coroutine function to run.
        """
        self.delay_seconds = delay_seconds
        self._action = action
        self._timer: asyncio.TimerHandle | None = None
        self._pending: tuple[Any, ...] | None = None
        self._tasks: set[asyncio.Task] = set()

    def __call__(self, *args: Any) -> None:
        """Request the action with the given arguments."""
        loop = asyncio.get_running_loop()
        if self._timer is None:
            self._spawn(args)
        else:
            self._timer.cancel()
            self._pending = args
        self._timer = loop.call_later(self.delay_seconds, self._on_quiet)

    def cancel(self) -> None:
        """Drop any pending trailing call and cancel running actions."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._pending = None
        for task in list(self._tasks):
            task.cancel()

    async def drain(self) -> None:
        """Wait for actions that are currently running."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _on_quiet(self) -> None:
        self._timer = None
        if self._pending is not None:
            args, self._pending = self._pending, None
            self._spawn(args)

    def _spawn(self, args: tuple[Any, ...]) -> None:
        task = asyncio.create_task(self._run(args))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, args: tuple[Any, ...]) -> None:
        try:
            await self._action(*args)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Debounced action failed: {e}", exc_info=True)
