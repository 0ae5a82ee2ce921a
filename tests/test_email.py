"""Unit tests for the aiosmtplib mail transport."""

from __future__ import annotations

import aiosmtplib
import pytest

from complaint_desk.domain.entities import SmtpSettings
from complaint_desk.infrastructure import email as email_module
from complaint_desk.infrastructure.email import (
    MailTransportError,
    OutgoingEmail,
    SmtpMailTransport,
    build_message,
)

MESSAGE = OutgoingEmail(
    to="user@example.com",
    subject="Ticket update",
    html_body="<p>Hello</p>",
    sender_name="Acme",
)


def _settings(port: str | None = "587") -> SmtpSettings:
    return SmtpSettings(host="smtp.example.com", port=port, user="desk@acme.example.com", password="pw")


def test_build_message_uses_organization_as_sender() -> None:
    message = build_message(MESSAGE, _settings())

    assert message["From"] == "Acme <desk@acme.example.com>"
    assert message["To"] == "user@example.com"
    assert message["Subject"] == "Ticket update"
    assert message["Message-ID"]
    html_part = message.get_body(preferencelist=("html",))
    assert "<p>Hello</p>" in html_part.get_content()


@pytest.mark.anyio
async def test_send_uses_starttls_on_submission_port(monkeypatch) -> None:
    calls = []

    async def fake_send(message, **kwargs):
        calls.append((message, kwargs))

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)

    await SmtpMailTransport(timeout=5).send(MESSAGE, _settings())

    _, kwargs = calls[0]
    assert kwargs["hostname"] == "smtp.example.com"
    assert kwargs["port"] == 587
    assert kwargs["username"] == "desk@acme.example.com"
    assert kwargs["use_tls"] is False
    assert kwargs["start_tls"] is None
    assert kwargs["timeout"] == 5


@pytest.mark.anyio
async def test_send_uses_implicit_tls_on_port_465(monkeypatch) -> None:
    calls = []

    async def fake_send(message, **kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)

    await SmtpMailTransport().send(MESSAGE, _settings("465"))

    assert calls[0]["use_tls"] is True
    assert calls[0]["start_tls"] is False


@pytest.mark.anyio
async def test_invalid_port_falls_back_to_default(monkeypatch) -> None:
    calls = []

    async def fake_send(message, **kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)

    await SmtpMailTransport().send(MESSAGE, _settings("not-a-port"))

    assert calls[0]["port"] == 587


@pytest.mark.anyio
async def test_send_wraps_smtp_errors(monkeypatch) -> None:
    async def fake_send(message, **kwargs):
        raise aiosmtplib.SMTPAuthenticationError(535, "Authentication failed")

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)

    with pytest.raises(MailTransportError) as exc_info:
        await SmtpMailTransport().send(MESSAGE, _settings())

    assert "535" in str(exc_info.value)
    assert "Authentication failed" in str(exc_info.value)


@pytest.mark.anyio
async def test_send_wraps_connection_errors(monkeypatch) -> None:
    async def fake_send(message, **kwargs):
        raise ConnectionRefusedError("Connection refused")

    monkeypatch.setattr(email_module.aiosmtplib, "send", fake_send)

    with pytest.raises(MailTransportError, match="Connection refused"):
        await SmtpMailTransport().send(MESSAGE, _settings())
