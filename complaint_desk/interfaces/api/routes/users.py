"""Endpoints for members of an organization."""

from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_user_approved,
    notify_user_profile_updated,
)
from complaint_desk.application.use_cases.users import (
    approve_user,
    change_password,
    change_user_status,
    get_user,
    list_organization_users,
    record_presence,
    reject_user,
    update_notification_preferences,
    update_user_profile,
)
from complaint_desk.domain.entities import STATUS_ACTIVE, UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.interfaces.api.dependencies import (
    get_current_active_user,
    get_current_user,
    get_dispatcher,
    require_admin,
)
from complaint_desk.interfaces.api.routes_helpers import (
    USE_CASE_ERRORS,
    http_error_from,
    user_to_read_model,
)
from complaint_desk.interfaces.api.schemas import (
    NotificationPreferencesSchema,
    PasswordChange,
    ProfileUpdate,
    UserRead,
    UserStatusUpdate,
    UserUpdate,
)

router = APIRouter(prefix="/users", tags=["users"])


def _notify_status_change(
    background_tasks: BackgroundTasks,
    dispatcher: NotificationDispatcher,
    before: UserProfile,
    after: UserProfile,
) -> None:
    if before.status != after.status and after.status == STATUS_ACTIVE:
        background_tasks.add_task(notify_user_approved, dispatcher, user=after)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: UserProfile = Depends(get_current_user)):
    """Return the signed in user, including users pending approval."""

    return user_to_read_model(current_user)


@router.patch("/me", response_model=UserRead)
def update_current_user(
    payload: ProfileUpdate,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        _, updated = update_user_profile(
            db,
            org_id=current_user.org_id,
            user_id=current_user.id,
            name=payload.name,
            phone=payload.phone,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return user_to_read_model(updated)


@router.put("/me/preferences", response_model=UserRead)
def update_current_user_preferences(
    payload: NotificationPreferencesSchema,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    """Toggle the notification emails of the signed in user."""

    try:
        updated = update_notification_preferences(
            db,
            org_id=current_user.org_id,
            user_id=current_user.id,
            ticket_updates=payload.ticket_updates,
            new_comments=payload.new_comments,
            user_approvals=payload.user_approvals,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return user_to_read_model(updated)


@router.post("/me/password", status_code=status.HTTP_204_NO_CONTENT)
def update_current_user_password(
    payload: PasswordChange,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> None:
    try:
        change_password(
            db,
            org_id=current_user.org_id,
            user_id=current_user.id,
            current_password=payload.current_password,
            new_password=payload.new_password,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.post("/me/heartbeat", status_code=status.HTTP_204_NO_CONTENT)
def heartbeat(
    current_user: UserProfile = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> None:
    """Refresh the presence timestamp of the signed in user."""

    record_presence(db, current_user.id)


@router.get("/", response_model=list[UserRead])
def read_users(
    role: str | None = None,
    status_filter: str | None = None,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    """List the members of the organization of the signed in user."""

    users = list_organization_users(
        db, org_id=current_user.org_id, role=role, status=status_filter
    )
    return [user_to_read_model(user) for user in users]


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        user = get_user(db, org_id=current_user.org_id, user_id=user_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return user_to_read_model(user)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    payload: UserUpdate,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """Update a member and let them know their profile changed."""

    try:
        before, after = update_user_profile(
            db,
            org_id=current_user.org_id,
            user_id=user_id,
            name=payload.name,
            phone=payload.phone,
            role=payload.role,
            department=payload.department,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    background_tasks.add_task(
        notify_user_profile_updated, dispatcher, before=before, after=after
    )
    return user_to_read_model(after)


@router.post("/{user_id}/approve", response_model=UserRead)
def approve(
    user_id: str,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    try:
        before, after = approve_user(
            db, org_id=current_user.org_id, actor_id=current_user.id, user_id=user_id
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    _notify_status_change(background_tasks, dispatcher, before, after)
    return user_to_read_model(after)


@router.post("/{user_id}/reject", response_model=UserRead)
def reject(
    user_id: str,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    try:
        _, after = reject_user(
            db, org_id=current_user.org_id, actor_id=current_user.id, user_id=user_id
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    return user_to_read_model(after)


@router.put("/{user_id}/status", response_model=UserRead)
def update_user_status(
    user_id: str,
    payload: UserStatusUpdate,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """Activate or suspend a member."""

    try:
        before, after = change_user_status(
            db,
            org_id=current_user.org_id,
            actor_id=current_user.id,
            user_id=user_id,
            status=payload.status,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    _notify_status_change(background_tasks, dispatcher, before, after)
    return user_to_read_model(after)
