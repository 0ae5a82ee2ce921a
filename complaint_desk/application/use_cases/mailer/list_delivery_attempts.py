"""Use case for reading the email delivery log of an organization."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import DeliveryAttempt
from complaint_desk.infrastructure.repositories import EmailLogRepository


def list_delivery_attempts(
    session: Session, *, org_id: str, limit: int | None = 100
) -> Sequence[DeliveryAttempt]:
    """Return the most recent delivery attempts, newest first."""

    return EmailLogRepository(session).list_for_org(org_id, limit=limit)
