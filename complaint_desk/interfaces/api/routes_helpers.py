"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from complaint_desk.application.use_cases.errors import EntityNotFoundError, PermissionDeniedError
from complaint_desk.application.use_cases.users import is_online
from complaint_desk.config import get_settings
from complaint_desk.domain.entities import Organization, UserProfile
from complaint_desk.interfaces.api.schemas import OrganizationRead, UserRead

USE_CASE_ERRORS = (EntityNotFoundError, PermissionDeniedError, ValueError)


def http_error_from(exc: Exception) -> HTTPException:
    """Translate a use case error into the matching HTTP error."""

    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, PermissionDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def user_to_read_model(user: UserProfile) -> UserRead:
    online = is_online(user, get_settings().presence_threshold_seconds)
    return UserRead.model_validate(user).model_copy(update={"online": online})


def organization_to_read_model(organization: Organization) -> OrganizationRead:
    """Expose the mail settings of an organization without its password."""

    smtp = organization.smtp
    return OrganizationRead(
        id=organization.id,
        name=organization.name,
        owner_id=organization.owner_id,
        theme=organization.theme,
        smtp_configured=organization.has_mail_transport(),
        smtp_host=smtp.host if smtp else None,
        smtp_port=smtp.port if smtp else None,
        smtp_user=smtp.user if smtp else None,
        created_at=organization.created_at,
    )
