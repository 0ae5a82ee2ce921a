"""Endpoints for managing ticket categories."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.categories import (
    create_category,
    delete_category,
    list_categories,
    update_category,
)
from complaint_desk.domain.entities import UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.interfaces.api.dependencies import get_current_active_user, require_admin
from complaint_desk.interfaces.api.routes_helpers import USE_CASE_ERRORS, http_error_from
from complaint_desk.interfaces.api.schemas import CategoryCreate, CategoryRead, CategoryUpdate

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("/", response_model=list[CategoryRead])
def read_categories(
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    return list_categories(db, org_id=current_user.org_id)


@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
def create_category_endpoint(
    payload: CategoryCreate,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return create_category(
            db, org_id=current_user.org_id, name=payload.name, description=payload.description
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.patch("/{category_id}", response_model=CategoryRead)
def update_category_endpoint(
    category_id: str,
    payload: CategoryUpdate,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        return update_category(
            db,
            org_id=current_user.org_id,
            category_id=category_id,
            name=payload.name,
            description=payload.description,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category_endpoint(
    category_id: str,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    try:
        delete_category(db, org_id=current_user.org_id, category_id=category_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
