"""Use cases for reading user profiles."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.errors import EntityNotFoundError
from complaint_desk.domain.entities import UserProfile
from complaint_desk.infrastructure.repositories import UserRepository


def get_user(session: Session, *, org_id: str, user_id: str) -> UserProfile:
    user = UserRepository(session).get(user_id)
    if user is None or user.org_id != org_id:
        raise EntityNotFoundError("User not found")
    return user


def list_organization_users(
    session: Session,
    *,
    org_id: str,
    role: str | None = None,
    status: str | None = None,
) -> Sequence[UserProfile]:
    """Return the members of an organization, optionally filtered."""

    return UserRepository(session).list_for_org(org_id, role=role, status=status)
