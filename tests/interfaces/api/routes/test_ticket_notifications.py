"""End-to-end tests for the notifications produced by ticket and user workflows."""

from __future__ import annotations

from fastapi.testclient import TestClient


def _notifications(client: TestClient, account) -> list[dict]:
    response = client.get("/notifications/", headers=account.headers)
    assert response.status_code == 200, response.text
    return response.json()


def _titles(client: TestClient, account) -> list[str]:
    return [notification["title"] for notification in _notifications(client, account)]


def _create_ticket(client: TestClient, account, **overrides) -> dict:
    payload = {
        "title": "Broken chair",
        "description": "The chair in room 4 is broken",
        "priority": "High",
        "department": "General",
        "category": "General Inquiry",
    }
    payload.update(overrides)
    response = client.post("/tickets/", json=payload, headers=account.headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_registration_and_approval_notifications(client: TestClient, admin, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")

    admin_notifications = _notifications(client, admin)
    assert admin_notifications[0]["title"] == "New User Pending Approval"
    assert admin_notifications[0]["iconName"] == "userCheck"
    assert admin_notifications[0]["link"] == "/dashboard/admin/users"
    assert admin_notifications[0]["read"] is False
    assert _titles(client, employee) == ["Account Approved"]


def test_ticket_lifecycle_notifications(client: TestClient, admin, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")
    ticket = _create_ticket(client, employee)

    assert _titles(client, admin)[0] == 'New Ticket: "Broken chair"'

    comment = client.post(
        f"/tickets/{ticket['id']}/comments", json={"text": "On it"}, headers=admin.headers
    )
    assert comment.status_code == 201
    own_comment = client.post(
        f"/tickets/{ticket['id']}/comments", json={"text": "Thanks"}, headers=employee.headers
    )
    assert own_comment.status_code == 201

    resolved = client.patch(
        f"/tickets/{ticket['id']}", json={"status": "Resolved"}, headers=admin.headers
    )
    assert resolved.status_code == 200
    again = client.patch(
        f"/tickets/{ticket['id']}", json={"status": "Resolved"}, headers=admin.headers
    )
    assert again.status_code == 200

    notifications = _notifications(client, employee)
    assert [notification["title"] for notification in notifications] == [
        'Ticket Resolved: "Broken chair"',
        'New Comment on "Broken chair"',
        "Account Approved",
    ]
    assert notifications[0]["link"] == f"/dashboard/tickets/{ticket['id']}"
    assert notifications[1]["description"] == "Alex Admin added a new comment."


def test_reassignment_notifies_new_supervisor(client: TestClient, admin, make_employee) -> None:
    supervisor = make_employee("sam@acme.example.com", name="Sam Supervisor")
    employee = make_employee("riley@acme.example.com")
    client.patch(f"/users/{supervisor.id}", json={"role": "supervisor"}, headers=admin.headers)
    department = client.post(
        "/departments/", json={"name": "IT", "supervisor_id": supervisor.id}, headers=admin.headers
    )
    assert department.status_code == 201, department.text
    ticket = _create_ticket(client, employee, title="No wifi")

    response = client.patch(
        f"/tickets/{ticket['id']}", json={"department": "IT"}, headers=admin.headers
    )

    assert response.status_code == 200
    assert _titles(client, supervisor)[0] == 'Ticket Assigned: "No wifi"'
    assert "Your Profile Was Updated" in _titles(client, supervisor)


def test_employees_cannot_triage_tickets(client: TestClient, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")
    ticket = _create_ticket(client, employee)

    response = client.patch(
        f"/tickets/{ticket['id']}", json={"status": "Resolved"}, headers=employee.headers
    )

    assert response.status_code == 403


def test_other_employees_cannot_see_private_tickets(client: TestClient, make_employee) -> None:
    reporter = make_employee("riley@acme.example.com")
    other = make_employee("casey@acme.example.com", name="Casey")
    ticket = _create_ticket(client, reporter)

    assert client.get(f"/tickets/{ticket['id']}", headers=other.headers).status_code == 404
    assert client.get("/tickets/?view=organization", headers=other.headers).status_code == 403


def test_mark_all_read_twice(client: TestClient, admin, make_employee) -> None:
    make_employee("riley@acme.example.com")
    make_employee("casey@acme.example.com", name="Casey")

    first = client.post("/notifications/read-all", headers=admin.headers)
    second = client.post("/notifications/read-all", headers=admin.headers)

    assert first.json() == {"updated": 2}
    assert second.json() == {"updated": 0}
    assert all(notification["read"] for notification in _notifications(client, admin))


def test_mark_single_notification_read(client: TestClient, admin, make_employee) -> None:
    make_employee("riley@acme.example.com")
    notification = _notifications(client, admin)[0]

    response = client.post(f"/notifications/{notification['id']}/read", headers=admin.headers)
    missing = client.post("/notifications/unknown/read", headers=admin.headers)

    assert response.status_code == 204
    assert missing.status_code == 404
    assert _notifications(client, admin)[0]["read"] is True


def test_notification_emails_respect_preferences(
    client: TestClient, admin, make_employee, configure_smtp, mail_transport
) -> None:
    configure_smtp()
    employee = make_employee("riley@acme.example.com")
    client.put(
        "/users/me/preferences", json={"new_comments": False}, headers=employee.headers
    )
    ticket = _create_ticket(client, employee)
    sent_before = len(mail_transport.sent)

    client.post(f"/tickets/{ticket['id']}/comments", json={"text": "On it"}, headers=admin.headers)
    assert len(mail_transport.sent) == sent_before
    assert _titles(client, employee)[0] == 'New Comment on "Broken chair"'

    client.patch(f"/tickets/{ticket['id']}", json={"status": "Resolved"}, headers=admin.headers)
    assert mail_transport.sent[-1].to == "riley@acme.example.com"
    assert mail_transport.sent[-1].sender_name == "Acme"


def test_emails_without_smtp_are_logged_as_failures(
    client: TestClient, admin, make_employee, mail_transport
) -> None:
    make_employee("riley@acme.example.com")

    logs = client.get("/mailer/logs", headers=admin.headers).json()

    assert mail_transport.sent == []
    assert logs
    assert {log["status"] for log in logs} == {"failure"}
    assert {log["error"] for log in logs} == {"SMTP settings not configured"}
