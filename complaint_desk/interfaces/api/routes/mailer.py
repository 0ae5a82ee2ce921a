"""Endpoints for the outbound email of an organization."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.mailer import (
    TenantMailer,
    list_delivery_attempts,
    send_custom_email,
    send_test_email,
)
from complaint_desk.domain.entities import UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.infrastructure.email import MailTransportError
from complaint_desk.infrastructure.notifications import SqlAlchemyDirectory
from complaint_desk.interfaces.api.dependencies import (
    get_directory,
    get_tenant_mailer,
    require_admin,
)
from complaint_desk.interfaces.api.schemas import (
    CustomEmailRequest,
    CustomEmailResponse,
    DeliveryAttemptRead,
    TestEmailRequest,
    TestEmailResponse,
)

router = APIRouter(prefix="/mailer", tags=["mailer"])
logger = logging.getLogger(__name__)


@router.post("/custom", response_model=CustomEmailResponse)
async def send_custom_email_endpoint(
    payload: CustomEmailRequest,
    current_user: UserProfile = Depends(require_admin),
    mailer: TenantMailer = Depends(get_tenant_mailer),
    directory: SqlAlchemyDirectory = Depends(get_directory),
):
    """Send an email written by an admin to selected members."""

    try:
        result = await send_custom_email(
            mailer,
            directory,
            org_id=current_user.org_id,
            recipient_ids=payload.recipient_ids,
            subject=payload.subject,
            body=payload.body,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info(
        "Custom email for organization %s: %s sent, %s skipped, %s failed",
        current_user.org_id,
        len(result.sent),
        len(result.skipped),
        len(result.failed),
    )
    return result


@router.post("/test", response_model=TestEmailResponse)
async def send_test_email_endpoint(
    payload: TestEmailRequest,
    current_user: UserProfile = Depends(require_admin),
    mailer: TenantMailer = Depends(get_tenant_mailer),
):
    """Verify the SMTP settings by sending a fixed message."""

    try:
        sent = await send_test_email(
            mailer, org_id=current_user.org_id, recipient_email=payload.recipient_email
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except MailTransportError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    if not sent:
        return TestEmailResponse(sent=False, message="SMTP settings are not configured.")
    return TestEmailResponse(sent=True, message="Test email sent successfully.")


@router.get("/logs", response_model=list[DeliveryAttemptRead])
def read_delivery_attempts(
    limit: int = 100,
    current_user: UserProfile = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Return the most recent delivery attempts of the organization."""

    return list_delivery_attempts(db, org_id=current_user.org_id, limit=max(1, min(limit, 500)))
