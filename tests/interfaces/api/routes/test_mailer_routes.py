"""Tests for the admin email endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_test_email_without_smtp(client: TestClient, admin, mail_transport) -> None:
    response = client.post(
        "/mailer/test", json={"recipient_email": "admin@acme.example.com"}, headers=admin.headers
    )

    assert response.status_code == 200
    assert response.json()["sent"] is False
    assert mail_transport.sent == []


def test_test_email_with_smtp(client: TestClient, admin, configure_smtp, mail_transport) -> None:
    configure_smtp()

    response = client.post(
        "/mailer/test", json={"recipient_email": "admin@acme.example.com"}, headers=admin.headers
    )
    logs = client.get("/mailer/logs", headers=admin.headers).json()

    assert response.json() == {"sent": True, "message": "Test email sent successfully."}
    assert mail_transport.sent[0].subject == "Test Email from Complaint Management System"
    assert logs[0]["status"] == "success"


def test_smtp_password_is_never_returned(client: TestClient, admin, configure_smtp) -> None:
    configure_smtp()

    organization = client.get("/organizations/me", headers=admin.headers).json()

    assert organization["smtp_configured"] is True
    assert organization["smtp_host"] == "smtp.acme.example.com"
    assert "smtp-secret" not in str(organization)


def test_custom_email_reports_each_recipient(
    client: TestClient, admin, make_employee, configure_smtp, mail_transport
) -> None:
    configure_smtp()
    employee = make_employee("riley@acme.example.com")
    sent_before = len(mail_transport.sent)

    response = client.post(
        "/mailer/custom",
        json={
            "recipient_ids": [employee.id, "ghost"],
            "subject": "Office closed",
            "body": "Closed on Friday\nSee you Monday",
        },
        headers=admin.headers,
    )

    assert response.status_code == 200
    assert response.json() == {"sent": [employee.id], "skipped": ["ghost"], "failed": []}
    email = mail_transport.sent[sent_before]
    assert email.to == "riley@acme.example.com"
    assert email.html_body == "<p>Closed on Friday<br>See you Monday</p>"


def test_mailer_is_admin_only(client: TestClient, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")

    response = client.get("/mailer/logs", headers=employee.headers)

    assert response.status_code == 403
