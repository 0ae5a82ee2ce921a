"""Tests for tenant email delivery and its audit trail."""

from __future__ import annotations

import pytest

from complaint_desk.application.use_cases.mailer import (
    SEND_FAILED_MESSAGE,
    SMTP_NOT_CONFIGURED,
    TenantMailer,
    format_email_body,
    send_custom_email,
    send_test_email,
)
from complaint_desk.domain.entities import DeliveryStatus
from complaint_desk.infrastructure.email import MailTransportError
from notification_fakes import (
    ORG_ID,
    FakeDirectory,
    FakeTransport,
    RecordingDeliveryLog,
    make_organization,
    make_profile,
)


def _mailer(*, with_smtp: bool = True, transport=None, profiles=()):
    directory = FakeDirectory(
        profiles=profiles, organizations=[make_organization(with_smtp=with_smtp)]
    )
    transport = transport or FakeTransport()
    log = RecordingDeliveryLog()
    return TenantMailer(directory=directory, transport=transport, delivery_log=log), directory, transport, log


@pytest.mark.anyio
async def test_successful_send_is_logged() -> None:
    mailer, _, transport, log = _mailer()

    assert await mailer.send("a@example.com", "Hi", "<p>Hi</p>", ORG_ID) is True

    assert transport.sent[0].sender_name == "Acme"
    assert len(log.attempts) == 1
    assert log.attempts[0].status is DeliveryStatus.SUCCESS
    assert log.attempts[0].org_id == ORG_ID
    assert log.attempts[0].error is None


@pytest.mark.anyio
async def test_missing_smtp_settings_skip_send_and_log_failure() -> None:
    mailer, _, transport, log = _mailer(with_smtp=False)

    assert await mailer.send("a@example.com", "Hi", "<p>Hi</p>", ORG_ID) is False

    assert transport.sent == []
    assert log.attempts[0].status is DeliveryStatus.FAILURE
    assert log.attempts[0].error == SMTP_NOT_CONFIGURED


@pytest.mark.anyio
async def test_unknown_organization_is_treated_as_unconfigured() -> None:
    mailer, _, _, log = _mailer()

    assert await mailer.send("a@example.com", "Hi", "<p>Hi</p>", "missing-org") is False
    assert log.attempts[0].error == SMTP_NOT_CONFIGURED


@pytest.mark.anyio
async def test_transport_failure_is_logged_and_raised() -> None:
    mailer, _, _, log = _mailer(transport=FakeTransport(error=OSError("timed out")))

    with pytest.raises(MailTransportError, match=SEND_FAILED_MESSAGE):
        await mailer.send("a@example.com", "Hi", "<p>Hi</p>", ORG_ID)

    assert log.attempts[0].status is DeliveryStatus.FAILURE
    assert log.attempts[0].error == "timed out"


@pytest.mark.anyio
async def test_delivery_log_errors_do_not_break_sending() -> None:
    class BrokenLog:
        async def append(self, org_id, attempt):
            raise RuntimeError("log store down")

    directory = FakeDirectory(organizations=[make_organization()])
    mailer = TenantMailer(directory=directory, transport=FakeTransport(), delivery_log=BrokenLog())

    assert await mailer.send("a@example.com", "Hi", "<p>Hi</p>", ORG_ID) is True


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        ("Hello\nWorld", "<p>Hello<br>World</p>"),
        ("<h1>Ready</h1>", "<h1>Ready</h1>"),
    ],
)
def test_format_email_body(body: str, expected: str) -> None:
    assert format_email_body(body) == expected


@pytest.mark.anyio
async def test_custom_email_skips_unknown_and_foreign_recipients() -> None:
    profiles = [make_profile("u1"), make_profile("u2"), make_profile("x1", org_id="org-2")]
    mailer, directory, transport, _ = _mailer(profiles=profiles)

    result = await send_custom_email(
        mailer,
        directory,
        org_id=ORG_ID,
        recipient_ids=["u1", "u2", "u1", "ghost", "x1"],
        subject="Office closed",
        body="See you\nMonday",
    )

    assert sorted(result.sent) == ["u1", "u2"]
    assert sorted(result.skipped) == ["ghost", "x1"]
    assert result.failed == []
    assert {email.to for email in transport.sent} == {"u1@example.com", "u2@example.com"}
    assert transport.sent[0].html_body == "<p>See you<br>Monday</p>"


@pytest.mark.anyio
async def test_custom_email_reports_failed_recipients() -> None:
    mailer, directory, _, log = _mailer(
        profiles=[make_profile("u1")], transport=FakeTransport(error=OSError("down"))
    )

    result = await send_custom_email(
        mailer, directory, org_id=ORG_ID, recipient_ids=["u1"], subject="Hi", body="Hi"
    )

    assert result.failed == ["u1"]
    assert log.attempts[0].status is DeliveryStatus.FAILURE


@pytest.mark.anyio
async def test_custom_email_requires_recipients() -> None:
    mailer, directory, _, _ = _mailer()

    with pytest.raises(ValueError):
        await send_custom_email(
            mailer, directory, org_id=ORG_ID, recipient_ids=[], subject="Hi", body="Hi"
        )


@pytest.mark.anyio
async def test_test_email_goes_through_tenant_smtp() -> None:
    mailer, _, transport, log = _mailer()

    assert await send_test_email(mailer, org_id=ORG_ID, recipient_email="admin@example.com")

    assert transport.sent[0].to == "admin@example.com"
    assert log.attempts[0].status is DeliveryStatus.SUCCESS
