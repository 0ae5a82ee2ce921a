"""Use cases for approving, rejecting and suspending members."""

from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import STATUS_ACTIVE, STATUS_INACTIVE, STATUSES, UserProfile
from complaint_desk.infrastructure.repositories import UserRepository

from .get_user import get_user


def change_user_status(
    session: Session,
    *,
    org_id: str,
    actor_id: str,
    user_id: str,
    status: str,
) -> tuple[UserProfile, UserProfile]:
    """Set the status of a member and return the profile before and after."""

    if status not in STATUSES:
        raise ValueError("Unknown status")
    if user_id == actor_id:
        raise ValueError("You cannot change your own status.")

    current = get_user(session, org_id=org_id, user_id=user_id)
    if current.status == status:
        return current, current
    updated = UserRepository(session).update(replace(current, status=status))
    return current, updated


def approve_user(session: Session, *, org_id: str, actor_id: str, user_id: str):
    return change_user_status(
        session, org_id=org_id, actor_id=actor_id, user_id=user_id, status=STATUS_ACTIVE
    )


def reject_user(session: Session, *, org_id: str, actor_id: str, user_id: str):
    return change_user_status(
        session, org_id=org_id, actor_id=actor_id, user_id=user_id, status=STATUS_INACTIVE
    )
