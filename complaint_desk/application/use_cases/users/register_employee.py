"""Use case for self-registration of employees."""

from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.errors import EntityNotFoundError
from complaint_desk.domain.entities import (
    ROLE_EMPLOYEE,
    STATUS_PENDING,
    NotificationPreferences,
    UserProfile,
)
from complaint_desk.infrastructure.repositories import (
    DepartmentRepository,
    OrganizationRepository,
    UserRepository,
)
from complaint_desk.infrastructure.security import get_password_hash


def register_employee(
    session: Session,
    *,
    org_id: str,
    name: str,
    email: str,
    password: str,
    department: str,
    phone: str | None = None,
) -> UserProfile:
    """Create a pending employee profile awaiting admin approval."""

    if OrganizationRepository(session).get(org_id) is None:
        raise EntityNotFoundError("Organization not found")

    name = name.strip()
    if not name:
        raise ValueError("The name is required")

    if DepartmentRepository(session).get_by_name(org_id, department) is None:
        raise ValueError("Unknown department")

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValueError("The email address is already registered")

    user = UserProfile(
        id=None,
        org_id=org_id,
        email=email,
        name=name,
        password=get_password_hash(password),
        role=ROLE_EMPLOYEE,
        status=STATUS_PENDING,
        department=department,
        phone=phone or "",
        notification_preferences=NotificationPreferences.for_role(ROLE_EMPLOYEE),
    )
    return repository.create(user)
