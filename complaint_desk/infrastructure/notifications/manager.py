"""In-process change signals for notification subscribers."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections import defaultdict
from typing import DefaultDict, Set, Tuple

logger = logging.getLogger(__name__)

_Listener = Tuple[asyncio.AbstractEventLoop, "asyncio.Queue[None]"]


class NotificationChangeBroker:
    """Track listening queues grouped by user.

    ``publish`` may be called from worker threads; the signal is handed to
    each listener's own event loop.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[str, Set[_Listener]] = defaultdict(set)
        self._lock = threading.Lock()

    def listen(self, user_id: str) -> asyncio.Queue[None]:
        """Register a queue that receives a signal whenever ``user_id`` changes."""

        loop = asyncio.get_running_loop()
        queue: asyncio.Queue[None] = asyncio.Queue()
        with self._lock:
            self._listeners[user_id].add((loop, queue))
        return queue

    def forget(self, user_id: str, queue: asyncio.Queue[None]) -> None:
        """Remove ``queue`` from the listeners of ``user_id``."""

        with self._lock:
            listeners = self._listeners.get(user_id)
            if listeners is None:
                return
            for listener in [item for item in listeners if item[1] is queue]:
                listeners.discard(listener)
            if not listeners:
                self._listeners.pop(user_id, None)

    def publish(self, user_id: str) -> None:
        """Signal every listener of ``user_id``."""

        with self._lock:
            listeners = list(self._listeners.get(user_id, set()))
        for loop, queue in listeners:
            try:
                loop.call_soon_threadsafe(queue.put_nowait, None)
            except RuntimeError:
                logger.debug("Dropping listener of user %s bound to a closed loop", user_id)
                self.forget(user_id, queue)

    def listener_count(self, user_id: str) -> int:
        with self._lock:
            return len(self._listeners.get(user_id, ()))


notification_broker = NotificationChangeBroker()


__all__ = ["NotificationChangeBroker", "notification_broker"]
