"""Persistence helpers for notification records and the email delivery log."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import (
    DeliveryAttempt,
    DeliveryStatus,
    IconKind,
    NotificationRecord,
)
from complaint_desk.infrastructure.models import EmailLogModel, NotificationModel
from complaint_desk.utils import from_storage, storage_now, to_storage


class NotificationRepository:
    """Provide persistence operations for :class:`NotificationRecord` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: str,
        *,
        limit: int | None = None,
    ) -> Sequence[NotificationRecord]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, notification: NotificationRecord) -> NotificationRecord:
        model = NotificationModel(
            user_id=notification.user_id,
            title=notification.title,
            description=notification.description,
            link=notification.link,
            icon_name=IconKind(notification.icon_name).value,
            read=False,
            # The creation time is always assigned by the store.
            created_at=storage_now(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_as_read(self, user_id: str) -> int:
        """Flip every unread record of ``user_id`` in a single statement."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return int(updated or 0)

    def mark_as_read(self, notification_id: str, *, user_id: str) -> bool:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
                NotificationModel.read.is_(False),
            )
            .update({NotificationModel.read: True}, synchronize_session=False)
        )
        self.session.commit()
        return bool(updated)

    @staticmethod
    def _to_entity(model: NotificationModel) -> NotificationRecord:
        try:
            icon = IconKind(model.icon_name)
        except ValueError:
            icon = IconKind.BELL
        return NotificationRecord(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            link=model.link,
            icon_name=icon,
            read=bool(model.read),
            created_at=from_storage(model.created_at),
        )


class EmailLogRepository:
    """Append-only access to the email delivery log of an organization."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, attempt: DeliveryAttempt) -> DeliveryAttempt:
        model = EmailLogModel(
            org_id=attempt.org_id,
            to=attempt.to,
            subject=attempt.subject,
            status=DeliveryStatus(attempt.status).value,
            error=attempt.error,
            sent_at=to_storage(attempt.sent_at) or storage_now(),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_for_org(self, org_id: str, *, limit: int | None = 100) -> Sequence[DeliveryAttempt]:
        query = (
            self.session.query(EmailLogModel)
            .filter(EmailLogModel.org_id == org_id)
            .order_by(EmailLogModel.sent_at.desc(), EmailLogModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: EmailLogModel) -> DeliveryAttempt:
        return DeliveryAttempt(
            id=model.id,
            org_id=model.org_id,
            to=model.to,
            subject=model.subject,
            status=DeliveryStatus(model.status),
            error=model.error,
            sent_at=from_storage(model.sent_at),
        )


__all__ = ["EmailLogRepository", "NotificationRepository"]
