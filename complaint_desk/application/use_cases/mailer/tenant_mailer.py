"""Send email through the SMTP server configured by each organization."""

from __future__ import annotations

import logging
from typing import Protocol

from complaint_desk.application.use_cases.notifications.ports import DeliveryLog, Directory
from complaint_desk.domain.entities import DeliveryAttempt, DeliveryStatus, SmtpSettings
from complaint_desk.infrastructure.email import MailTransportError, OutgoingEmail
from complaint_desk.utils import local_now

logger = logging.getLogger(__name__)

SMTP_NOT_CONFIGURED = "SMTP settings not configured"
SEND_FAILED_MESSAGE = "Failed to send email. Please check your SMTP credentials and try again."


class MailTransport(Protocol):
    async def send(self, email: OutgoingEmail, smtp: SmtpSettings) -> None: ...


class TenantMailer:
    """Deliver messages on behalf of an organization.

    Every attempt leaves exactly one delivery-log row, including attempts
    skipped because the organization has no SMTP credentials.
    """

    def __init__(
        self,
        *,
        directory: Directory,
        transport: MailTransport,
        delivery_log: DeliveryLog,
    ) -> None:
        self._directory = directory
        self._transport = transport
        self._delivery_log = delivery_log

    async def send(self, to: str, subject: str, html_body: str, org_id: str) -> bool:
        """Send one message.

        Returns ``False`` when the organization cannot send email and raises
        :class:`MailTransportError` when the server rejects the message.
        """

        organization = await self._directory.get_organization(org_id)
        if organization is None or not organization.has_mail_transport():
            logger.warning(
                "SMTP settings not configured for organization %s. Skipping email to %s (%s)",
                org_id,
                to,
                subject,
            )
            await self._record(org_id, to, subject, DeliveryStatus.FAILURE, SMTP_NOT_CONFIGURED)
            return False

        email = OutgoingEmail(
            to=to,
            subject=subject,
            html_body=html_body,
            sender_name=organization.name,
        )
        try:
            await self._transport.send(email, organization.smtp)
        except Exception as exc:
            logger.error("Failed to send email to %s for organization %s: %s", to, org_id, exc)
            await self._record(
                org_id, to, subject, DeliveryStatus.FAILURE, str(exc) or "Unknown error"
            )
            raise MailTransportError(SEND_FAILED_MESSAGE) from exc

        await self._record(org_id, to, subject, DeliveryStatus.SUCCESS, None)
        return True

    async def _record(
        self,
        org_id: str,
        to: str,
        subject: str,
        status: DeliveryStatus,
        error: str | None,
    ) -> None:
        attempt = DeliveryAttempt(
            id=None,
            org_id=org_id,
            to=to,
            subject=subject,
            status=status,
            error=error,
            sent_at=local_now(),
        )
        try:
            await self._delivery_log.append(org_id, attempt)
        except Exception:
            logger.exception("Failed to log email for organization %s", org_id)


__all__ = ["MailTransport", "SEND_FAILED_MESSAGE", "SMTP_NOT_CONFIGURED", "TenantMailer"]
