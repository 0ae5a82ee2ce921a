"""Endpoints for managing departments."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.departments import (
    create_department,
    delete_department,
    list_departments,
    update_department,
)
from complaint_desk.domain.entities import UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.interfaces.api.dependencies import get_current_active_user, require_admin
from complaint_desk.interfaces.api.routes_helpers import USE_CASE_ERRORS, http_error_from
from complaint_desk.interfaces.api.schemas import (
    DepartmentCreate,
    DepartmentRead,
    DepartmentUpdate,
)

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("/", response_model=list[DepartmentRead])
def read_departments(
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return list_departments(db, org_id=current_user.org_id)


@router.post("/", response_model=DepartmentRead, status_code=status.HTTP_201_CREATED)
def create_department_endpoint(
    payload: DepartmentCreate,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return create_department(
            db,
            org_id=current_user.org_id,
            name=payload.name,
            supervisor_id=payload.supervisor_id,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.patch("/{department_id}", response_model=DepartmentRead)
def update_department_endpoint(
    department_id: str,
    payload: DepartmentUpdate,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Rename a department or change its supervisor.

    Sending ``supervisor_id: null`` removes the supervisor.
    """

    changes = {}
    if "supervisor_id" in payload.model_fields_set:
        changes["supervisor_id"] = payload.supervisor_id
    try:
        return update_department(
            db,
            org_id=current_user.org_id,
            department_id=department_id,
            name=payload.name,
            **changes,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department_endpoint(
    department_id: str,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    try:
        delete_department(db, org_id=current_user.org_id, department_id=department_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
