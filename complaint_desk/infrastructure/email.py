"""Outbound email over each tenant's own SMTP server."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

import aiosmtplib

from complaint_desk.domain.entities import SmtpSettings

logger = logging.getLogger(__name__)


class MailTransportError(RuntimeError):
    """Raised when an SMTP server rejects or cannot accept a message."""


@dataclass(frozen=True)
class OutgoingEmail:
    to: str
    subject: str
    html_body: str
    sender_name: str


def build_message(email: OutgoingEmail, smtp: SmtpSettings) -> EmailMessage:
    """Return the MIME message sent on behalf of the organization."""

    message = EmailMessage()
    message["From"] = formataddr((email.sender_name, smtp.user or ""))
    message["To"] = email.to
    message["Subject"] = email.subject
    message["Message-ID"] = make_msgid()
    message.set_content("This message requires an HTML capable email client.")
    message.add_alternative(email.html_body, subtype="html")
    return message


def _describe_smtp_error(exc: Exception) -> str:
    """Return a human readable description for an SMTP failure."""

    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None) or str(exc)
    if isinstance(message, bytes):
        message = message.decode("utf-8", errors="replace")
    message = str(message).strip()
    if code and message:
        return f"{code} {message}"
    if message:
        return message
    return type(exc).__name__


def _log_smtp_exception(exc: Exception, *, host: str | None, port: int) -> None:
    code = getattr(exc, "code", None)
    details = _describe_smtp_error(exc)
    if code:
        logger.error("SMTP server %s:%s rejected the message with status %s: %s", host, port, code, details)
    else:
        logger.error("SMTP delivery through %s:%s failed: %s", host, port, details)


class SmtpMailTransport:
    """Send messages with :mod:`aiosmtplib` using per-tenant credentials.

    Port 465 uses implicit TLS; every other port upgrades with STARTTLS when
    the server offers it.
    """

    def __init__(self, *, timeout: float = 30) -> None:
        self._timeout = timeout

    async def send(self, email: OutgoingEmail, smtp: SmtpSettings) -> None:
        port = smtp.resolved_port()
        implicit_tls = smtp.use_implicit_tls()
        message = build_message(email, smtp)
        try:
            await aiosmtplib.send(
                message,
                hostname=smtp.host,
                port=port,
                username=smtp.user,
                password=smtp.password,
                use_tls=implicit_tls,
                start_tls=False if implicit_tls else None,
                timeout=self._timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as exc:
            _log_smtp_exception(exc, host=smtp.host, port=port)
            raise MailTransportError(_describe_smtp_error(exc)) from exc

        logger.info("Message %s sent to %s", message["Message-ID"], email.to)


__all__ = ["MailTransportError", "OutgoingEmail", "SmtpMailTransport", "build_message"]
