"""Use cases for managing the departments of an organization."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Department
from complaint_desk.infrastructure.repositories import DepartmentRepository, UserRepository

from .errors import EntityNotFoundError

_UNSET = object()


def _resolve_supervisor(session: Session, org_id: str, supervisor_id: str | None) -> tuple[str | None, str | None]:
    if not supervisor_id:
        return None, None
    supervisor = UserRepository(session).get(supervisor_id)
    if supervisor is None or supervisor.org_id != org_id:
        raise ValueError("The supervisor does not belong to the organization")
    return supervisor.id, supervisor.name


def list_departments(session: Session, *, org_id: str) -> Sequence[Department]:
    return DepartmentRepository(session).list_for_org(org_id)


def create_department(
    session: Session,
    *,
    org_id: str,
    name: str,
    supervisor_id: str | None = None,
) -> Department:
    """Create a department, optionally assigning its supervisor."""

    name = name.strip()
    if not name:
        raise ValueError("The department name is required")
    repository = DepartmentRepository(session)
    if repository.get_by_name(org_id, name):
        raise ValueError("A department with that name already exists")

    supervisor_id, supervisor_name = _resolve_supervisor(session, org_id, supervisor_id)
    return repository.create(
        Department(
            id=None,
            org_id=org_id,
            name=name,
            supervisor_id=supervisor_id,
            supervisor_name=supervisor_name,
        )
    )


def update_department(
    session: Session,
    *,
    org_id: str,
    department_id: str,
    name: str | None = None,
    supervisor_id: str | None | object = _UNSET,
) -> Department:
    repository = DepartmentRepository(session)
    current = repository.get(org_id, department_id)
    if current is None:
        raise EntityNotFoundError("Department not found")

    updated = current
    if name is not None:
        name = name.strip()
        if not name:
            raise ValueError("The department name is required")
        existing = repository.get_by_name(org_id, name)
        if existing and existing.id != department_id:
            raise ValueError("A department with that name already exists")
        updated = replace(updated, name=name)

    if supervisor_id is not _UNSET:
        resolved_id, resolved_name = _resolve_supervisor(session, org_id, supervisor_id)
        updated = replace(updated, supervisor_id=resolved_id, supervisor_name=resolved_name)

    return repository.update(updated)


def delete_department(session: Session, *, org_id: str, department_id: str) -> None:
    repository = DepartmentRepository(session)
    if repository.get(org_id, department_id) is None:
        raise EntityNotFoundError("Department not found")
    repository.delete(org_id, department_id)


__all__ = ["create_department", "delete_department", "list_departments", "update_department"]
