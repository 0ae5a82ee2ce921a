"""Use cases for outbound email."""

from .list_delivery_attempts import list_delivery_attempts
from .send_custom_email import CustomEmailResult, format_email_body, send_custom_email
from .send_test_email import send_test_email
from .tenant_mailer import (
    SEND_FAILED_MESSAGE,
    SMTP_NOT_CONFIGURED,
    MailTransport,
    TenantMailer,
)

__all__ = [
    "CustomEmailResult",
    "MailTransport",
    "SEND_FAILED_MESSAGE",
    "SMTP_NOT_CONFIGURED",
    "TenantMailer",
    "format_email_body",
    "list_delivery_attempts",
    "send_custom_email",
    "send_test_email",
]
