"""Use cases for updating profiles and notification preferences."""

from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import ROLES, NotificationPreferences, UserProfile
from complaint_desk.infrastructure.repositories import DepartmentRepository, UserRepository
from complaint_desk.infrastructure.security import get_password_hash, verify_password

from .get_user import get_user


def update_user_profile(
    session: Session,
    *,
    org_id: str,
    user_id: str,
    name: str | None = None,
    phone: str | None = None,
    role: str | None = None,
    department: str | None = None,
) -> tuple[UserProfile, UserProfile]:
    """Update a member and return the profile before and after the change."""

    current = get_user(session, org_id=org_id, user_id=user_id)

    if role is not None and role not in ROLES:
        raise ValueError("Unknown role")
    if department is not None and department != current.department:
        if DepartmentRepository(session).get_by_name(org_id, department) is None:
            raise ValueError("Unknown department")
    if name is not None and not name.strip():
        raise ValueError("The name is required")

    updated = replace(
        current,
        name=name.strip() if name is not None else current.name,
        phone=phone if phone is not None else current.phone,
        role=role if role is not None else current.role,
        department=department if department is not None else current.department,
    )
    return current, UserRepository(session).update(updated)


def update_notification_preferences(
    session: Session,
    *,
    org_id: str,
    user_id: str,
    ticket_updates: bool | None = None,
    new_comments: bool | None = None,
    user_approvals: bool | None = None,
) -> UserProfile:
    """Toggle the email preferences of a user. ``None`` leaves a flag unchanged."""

    current = get_user(session, org_id=org_id, user_id=user_id)
    preferences = current.notification_preferences or NotificationPreferences()
    preferences = NotificationPreferences(
        ticket_updates=ticket_updates if ticket_updates is not None else preferences.ticket_updates,
        new_comments=new_comments if new_comments is not None else preferences.new_comments,
        user_approvals=user_approvals if user_approvals is not None else preferences.user_approvals,
    )
    return UserRepository(session).update(replace(current, notification_preferences=preferences))


def change_password(
    session: Session,
    *,
    org_id: str,
    user_id: str,
    current_password: str,
    new_password: str,
) -> UserProfile:
    current = get_user(session, org_id=org_id, user_id=user_id)
    if not verify_password(current_password, current.password):
        raise ValueError("The current password is incorrect")
    return UserRepository(session).update(
        replace(current, password=get_password_hash(new_password))
    )
