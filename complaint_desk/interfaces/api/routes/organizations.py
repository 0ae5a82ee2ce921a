"""Endpoints for the settings of the signed in user's organization."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.organizations import (
    get_organization,
    update_organization,
)
from complaint_desk.domain.entities import SmtpSettings, UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.interfaces.api.dependencies import get_current_active_user, require_admin
from complaint_desk.interfaces.api.routes_helpers import (
    USE_CASE_ERRORS,
    http_error_from,
    organization_to_read_model,
)
from complaint_desk.interfaces.api.schemas import OrganizationRead, OrganizationUpdate

router = APIRouter(prefix="/organizations", tags=["organizations"])


@router.get("/me", response_model=OrganizationRead)
def read_my_organization(
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        organization = get_organization(db, current_user.org_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return organization_to_read_model(organization)


@router.patch("/me", response_model=OrganizationRead)
def update_my_organization(
    payload: OrganizationUpdate,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Rename the organization, change its theme or its SMTP credentials."""

    changes: dict[str, object] = {"name": payload.name, "theme": payload.theme}
    if payload.clear_smtp:
        changes["smtp"] = None
    elif payload.smtp is not None:
        changes["smtp"] = SmtpSettings(**payload.smtp.model_dump())

    try:
        organization = update_organization(db, org_id=current_user.org_id, **changes)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return organization_to_read_model(organization)
