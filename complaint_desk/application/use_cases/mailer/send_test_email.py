"""Use case for verifying the SMTP settings of an organization."""

from __future__ import annotations

from .tenant_mailer import TenantMailer

TEST_EMAIL_SUBJECT = "Test Email from Complaint Management System"
TEST_EMAIL_BODY = (
    "<p>This is a test email to confirm your SMTP settings are configured correctly.</p>"
    "<p>If you received this, everything is working!</p>"
)


async def send_test_email(mailer: TenantMailer, *, org_id: str, recipient_email: str) -> bool:
    """Send the fixed test message. Raises ``MailTransportError`` on rejection."""

    if not org_id:
        raise ValueError("Organization ID is required to send a test email.")
    return await mailer.send(recipient_email, TEST_EMAIL_SUBJECT, TEST_EMAIL_BODY, org_id)


__all__ = ["TEST_EMAIL_BODY", "TEST_EMAIL_SUBJECT", "send_test_email"]
