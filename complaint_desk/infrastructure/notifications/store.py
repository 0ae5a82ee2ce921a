"""SQLAlchemy-backed adapters for the notification core.

Each call opens its own session on a worker thread so the async core never
blocks the event loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import TypeVar

from anyio import to_thread
from sqlalchemy.orm import Session

from complaint_desk.domain.entities import (
    DeliveryAttempt,
    Department,
    NotificationRecord,
    Organization,
    UserProfile,
)
from complaint_desk.infrastructure.repositories import (
    DepartmentRepository,
    EmailLogRepository,
    NotificationRepository,
    OrganizationRepository,
    UserRepository,
)

from .manager import NotificationChangeBroker

logger = logging.getLogger(__name__)

T = TypeVar("T")

SessionFactory = Callable[[], Session]


class _SessionRunner:
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    async def _run(self, work: Callable[[Session], T]) -> T:
        def _call() -> T:
            session = self._session_factory()
            try:
                return work(session)
            finally:
                session.close()

        return await to_thread.run_sync(_call)


class SqlAlchemyDirectory(_SessionRunner):
    """Profile, organization and department lookups."""

    async def get_profile(self, user_id: str) -> UserProfile | None:
        return await self._run(lambda session: UserRepository(session).get(user_id))

    async def get_organization(self, org_id: str) -> Organization | None:
        return await self._run(lambda session: OrganizationRepository(session).get(org_id))

    async def find_department_by_name(self, org_id: str, name: str) -> Department | None:
        return await self._run(
            lambda session: DepartmentRepository(session).get_by_name(org_id, name)
        )

    async def list_users(self, org_id: str, *, role: str | None = None) -> Sequence[UserProfile]:
        return await self._run(
            lambda session: UserRepository(session).list_for_org(org_id, role=role)
        )


class SqlAlchemyNotificationStore(_SessionRunner):
    """Notification records with a change signal after each committed write."""

    def __init__(self, session_factory: SessionFactory, broker: NotificationChangeBroker) -> None:
        super().__init__(session_factory)
        self._broker = broker

    async def append(self, record: NotificationRecord) -> NotificationRecord:
        stored = await self._run(lambda session: NotificationRepository(session).create(record))
        self._broker.publish(stored.user_id)
        return stored

    async def list_for_user(self, user_id: str) -> Sequence[NotificationRecord]:
        return await self._run(
            lambda session: NotificationRepository(session).list_for_user(user_id)
        )

    async def mark_all_read(self, user_id: str) -> int:
        updated = await self._run(
            lambda session: NotificationRepository(session).mark_all_as_read(user_id)
        )
        if updated:
            self._broker.publish(user_id)
        return updated

    async def mark_read(self, user_id: str, notification_id: str) -> bool:
        updated = await self._run(
            lambda session: NotificationRepository(session).mark_as_read(
                notification_id, user_id=user_id
            )
        )
        if updated:
            self._broker.publish(user_id)
        return updated


class SqlAlchemyDeliveryLog(_SessionRunner):
    """Email delivery audit trail. Write failures are logged and dropped."""

    async def append(self, org_id: str, attempt: DeliveryAttempt) -> None:
        entry = replace(attempt, org_id=org_id)
        try:
            await self._run(lambda session: EmailLogRepository(session).create(entry))
        except Exception:
            logger.exception("Failed to log email to %s for organization %s", attempt.to, org_id)

    async def list_for_org(self, org_id: str) -> Sequence[DeliveryAttempt]:
        return await self._run(lambda session: EmailLogRepository(session).list_for_org(org_id))


__all__ = [
    "SqlAlchemyDeliveryLog",
    "SqlAlchemyDirectory",
    "SqlAlchemyNotificationStore",
]
