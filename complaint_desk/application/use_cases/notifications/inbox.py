"""Read side of the notification subsystem."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from complaint_desk.domain.entities import NotificationRecord

from .ports import ChangeFeed, NotificationStore

logger = logging.getLogger(__name__)


class NotificationSubscription:
    """Live, newest-first view of one user's notifications.

    The first iteration yields the current state; every later iteration waits
    for a change and yields a fresh snapshot. Signals that arrive while a
    snapshot is being read are collapsed into a single refresh. Iteration ends
    once :meth:`unsubscribe` is called.

    Instances must be created from a running event loop.
    """

    def __init__(self, store: NotificationStore, changes: ChangeFeed, user_id: str) -> None:
        self._store = store
        self._changes = changes
        self._user_id = user_id
        self._queue = changes.listen(user_id)
        self._primed = False
        self._closed = False

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> "NotificationSubscription":
        return self

    async def __anext__(self) -> list[NotificationRecord]:
        if self._closed:
            raise StopAsyncIteration
        if self._primed:
            await self._queue.get()
            while not self._queue.empty():
                self._queue.get_nowait()
            if self._closed:
                raise StopAsyncIteration
        self._primed = True
        snapshot = list(await self._store.list_for_user(self._user_id))
        if self._closed:
            raise StopAsyncIteration
        return snapshot

    def unsubscribe(self) -> None:
        """Stop delivery. No snapshot is produced after this call."""

        if self._closed:
            return
        self._closed = True
        self._changes.forget(self._user_id, self._queue)
        # Wake a pending iteration so it can stop.
        self._queue.put_nowait(None)

    async def __aenter__(self) -> "NotificationSubscription":
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.unsubscribe()


class NotificationInbox:
    """Subscribe to and acknowledge the notifications of a user."""

    def __init__(self, store: NotificationStore, changes: ChangeFeed) -> None:
        self._store = store
        self._changes = changes

    def subscribe(self, user_id: str) -> NotificationSubscription:
        return NotificationSubscription(self._store, self._changes, user_id)

    async def list(self, user_id: str) -> Sequence[NotificationRecord]:
        return await self._store.list_for_user(user_id)

    async def mark_all_read(self, user_id: str) -> int:
        """Flip every unread record of ``user_id`` at once.

        Returns the number of records updated, zero when nothing was unread.
        """

        return await self._store.mark_all_read(user_id)

    async def mark_read(self, user_id: str, notification_id: str) -> bool:
        return await self._store.mark_read(user_id, notification_id)


class MarkReadDebouncer:
    """Mark every notification read a fixed delay after the menu opens.

    Scheduling again replaces the pending run; :meth:`cancel` drops it.
    """

    def __init__(self, inbox: NotificationInbox, delay: float) -> None:
        self._inbox = inbox
        self._delay = max(0.0, float(delay))
        self._task: asyncio.Task[None] | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, user_id: str) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(user_id))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, user_id: str) -> None:
        await asyncio.sleep(self._delay)
        try:
            updated = await self._inbox.mark_all_read(user_id)
        except Exception:
            logger.exception("Could not mark notifications as read for user %s", user_id)
            return
        logger.debug("Marked %s notifications as read for user %s", updated, user_id)


__all__ = ["MarkReadDebouncer", "NotificationInbox", "NotificationSubscription"]
