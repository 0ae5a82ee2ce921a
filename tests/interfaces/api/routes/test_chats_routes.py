"""Tests for direct messages between members."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_room_is_shared_and_tracks_last_message(client: TestClient, admin, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")

    first = client.post("/chats/", json={"user_id": employee.id}, headers=admin.headers)
    second = client.post("/chats/", json={"user_id": admin.id}, headers=employee.headers)
    room_id = first.json()["id"]

    assert first.status_code == 200
    assert second.json()["id"] == room_id

    sent = client.post(
        f"/chats/{room_id}/messages",
        json={"text": "", "attachments": [{"name": "a.png", "url": "https://files.test/a.png"}]},
        headers=employee.headers,
    )
    assert sent.status_code == 201

    rooms = client.get("/chats/", headers=admin.headers).json()
    messages = client.get(f"/chats/{room_id}/messages", headers=admin.headers).json()

    assert rooms[0]["last_message_text"] == "1 attachment(s)"
    assert rooms[0]["last_message_sender_id"] == employee.id
    assert messages[0]["attachments"][0]["name"] == "a.png"


def test_outsiders_cannot_read_a_room(client: TestClient, admin, make_employee) -> None:
    employee = make_employee("riley@acme.example.com")
    outsider = make_employee("casey@acme.example.com", name="Casey")
    room_id = client.post("/chats/", json={"user_id": employee.id}, headers=admin.headers).json()["id"]

    response = client.get(f"/chats/{room_id}/messages", headers=outsider.headers)

    assert response.status_code == 404


def test_cannot_chat_with_yourself(client: TestClient, admin) -> None:
    response = client.post("/chats/", json={"user_id": admin.id}, headers=admin.headers)

    assert response.status_code == 400
