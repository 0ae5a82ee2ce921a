"""Use cases for registering and configuring organizations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import (
    ROLE_ADMIN,
    STATUS_ACTIVE,
    Category,
    Department,
    NotificationPreferences,
    Organization,
    SmtpSettings,
    UserProfile,
)
from complaint_desk.infrastructure.repositories import (
    CategoryRepository,
    DepartmentRepository,
    OrganizationRepository,
    UserRepository,
)
from complaint_desk.infrastructure.security import get_password_hash
from complaint_desk.utils import new_id

from .errors import EntityNotFoundError

DEFAULT_DEPARTMENT_NAME = "General"
DEFAULT_CATEGORY_NAME = "General Inquiry"
DEFAULT_CATEGORY_DESCRIPTION = "For issues that don't fit into other categories."
THEMES: tuple[str, ...] = ("green", "blue", "orange", "rose", "violet")

_UNSET = object()


def register_organization(
    session: Session,
    *,
    org_name: str,
    admin_name: str,
    email: str,
    password: str,
) -> tuple[Organization, UserProfile]:
    """Create an organization, its first admin and the default structure.

    The admin supervises the default ``General`` department and the
    organization starts with a ``General Inquiry`` category.
    """

    org_name = org_name.strip()
    admin_name = admin_name.strip()
    if not org_name:
        raise ValueError("The organization name is required")
    if not admin_name:
        raise ValueError("The administrator name is required")

    users = UserRepository(session)
    if users.get_by_email(email):
        raise ValueError("The email address is already registered")

    admin_id = new_id()
    organization = OrganizationRepository(session).create(
        Organization(id=None, name=org_name, owner_id=admin_id)
    )
    admin = users.create(
        UserProfile(
            id=admin_id,
            org_id=organization.id,
            email=email,
            name=admin_name,
            password=get_password_hash(password),
            role=ROLE_ADMIN,
            status=STATUS_ACTIVE,
            department=DEFAULT_DEPARTMENT_NAME,
            notification_preferences=NotificationPreferences.for_role(ROLE_ADMIN),
        )
    )
    DepartmentRepository(session).create(
        Department(
            id=None,
            org_id=organization.id,
            name=DEFAULT_DEPARTMENT_NAME,
            supervisor_id=admin.id,
            supervisor_name=admin.name,
        )
    )
    CategoryRepository(session).create(
        Category(
            id=None,
            org_id=organization.id,
            name=DEFAULT_CATEGORY_NAME,
            description=DEFAULT_CATEGORY_DESCRIPTION,
        )
    )
    return organization, admin


def list_organizations(session: Session) -> Sequence[Organization]:
    return OrganizationRepository(session).list()


def get_organization(session: Session, org_id: str) -> Organization:
    organization = OrganizationRepository(session).get(org_id)
    if organization is None:
        raise EntityNotFoundError("Organization not found")
    return organization


def update_organization(
    session: Session,
    *,
    org_id: str,
    name: str | None = None,
    theme: str | None = None,
    smtp: SmtpSettings | None | object = _UNSET,
) -> Organization:
    """Update the name, theme or mail credentials of an organization.

    Passing ``smtp=None`` clears the mail credentials.
    """

    repository = OrganizationRepository(session)
    current = repository.get(org_id)
    if current is None:
        raise EntityNotFoundError("Organization not found")

    if name is not None and not name.strip():
        raise ValueError("The organization name cannot be empty")
    if theme is not None and theme not in THEMES:
        raise ValueError("Unknown theme")

    updated = replace(
        current,
        name=name.strip() if name is not None else current.name,
        theme=theme if theme is not None else current.theme,
    )
    if smtp is not _UNSET:
        updated = replace(updated, smtp=smtp)
    return repository.update(updated)


__all__ = [
    "DEFAULT_CATEGORY_NAME",
    "DEFAULT_DEPARTMENT_NAME",
    "THEMES",
    "get_organization",
    "list_organizations",
    "register_organization",
    "update_organization",
]
