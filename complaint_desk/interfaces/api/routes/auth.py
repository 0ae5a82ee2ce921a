"""Endpoints for registration and sign in."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_user_registered,
)
from complaint_desk.application.use_cases.organizations import (
    list_organizations,
    register_organization,
)
from complaint_desk.application.use_cases.users import (
    AuthenticationStatus,
    authenticate_user,
    record_presence,
    register_employee,
)
from complaint_desk.infrastructure.database import get_db
from complaint_desk.infrastructure.security import create_user_token
from complaint_desk.interfaces.api.dependencies import get_dispatcher
from complaint_desk.interfaces.api.routes_helpers import (
    USE_CASE_ERRORS,
    http_error_from,
    user_to_read_model,
)
from complaint_desk.interfaces.api.schemas import (
    EmployeeRegistration,
    OrganizationRegistration,
    OrganizationSummary,
    Token,
    UserRead,
)

router = APIRouter(prefix="/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post(
    "/register-organization", response_model=Token, status_code=status.HTTP_201_CREATED
)
def register_new_organization(
    payload: OrganizationRegistration,
    db: Session = Depends(get_db),
):
    """Create an organization with its administrator and sign the admin in."""

    try:
        organization, admin = register_organization(
            db,
            org_name=payload.org_name,
            admin_name=payload.admin_name,
            email=payload.email,
            password=payload.password,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    logger.info("Organization %s registered by %s", organization.id, admin.id)
    return {
        "access_token": create_user_token(admin),
        "token_type": "bearer",
        "role": admin.role,
        "status": admin.status,
    }


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(
    payload: EmployeeRegistration,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """Register an employee pending approval and notify the admins."""

    try:
        user = register_employee(
            db,
            org_id=payload.org_id,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            department=payload.department,
            phone=payload.phone,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    background_tasks.add_task(notify_user_registered, dispatcher, user=user)
    return user_to_read_model(user)


@router.post("/token", response_model=Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    """Authenticate the user by email and return a JWT."""

    user, auth_status = authenticate_user(db, form_data.username, form_data.password)

    if auth_status is AuthenticationStatus.INVALID_CREDENTIALS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if auth_status is AuthenticationStatus.INACTIVE:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been suspended. Please contact your administrator.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    record_presence(db, user.id)
    return {
        "access_token": create_user_token(user),
        "token_type": "bearer",
        "role": user.role,
        "status": user.status,
    }


@router.get("/organizations", response_model=list[OrganizationSummary])
def read_organizations(db: Session = Depends(get_db)):
    """List the organizations employees can register with."""

    return list_organizations(db)
