"""Tests for the realtime notification websocket."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from starlette.websockets import WebSocketDisconnect


def test_websocket_rejects_missing_or_invalid_token(client: TestClient) -> None:
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws") as websocket:
            websocket.receive_json()

    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/notifications/ws?token=not-a-token") as websocket:
            websocket.receive_json()


def test_websocket_rejects_users_awaiting_approval(client: TestClient, make_employee) -> None:
    employee = make_employee("waiting@acme.example.com", approve=False)

    with pytest.raises(WebSocketDisconnect) as excinfo:
        with client.websocket_connect(f"/notifications/ws?token={employee.token}") as websocket:
            websocket.receive_json()

    assert excinfo.value.code == 1008


def test_websocket_streams_snapshots(client: TestClient, admin, make_employee) -> None:
    make_employee("riley@acme.example.com")

    with client.websocket_connect(f"/notifications/ws?token={admin.token}") as websocket:
        initial = websocket.receive_json()
        assert initial["type"] == "snapshot"
        assert [item["title"] for item in initial["data"]] == ["New User Pending Approval"]
        assert initial["data"][0]["read"] is False

        make_employee("casey@acme.example.com", name="Casey", approve=False)
        updated = websocket.receive_json()
        assert updated["type"] == "snapshot"
        assert len(updated["data"]) == 2
        assert "Casey" in updated["data"][0]["description"]

        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}


def test_opening_the_menu_marks_everything_read(client: TestClient, admin, make_employee) -> None:
    make_employee("riley@acme.example.com")

    with client.websocket_connect(f"/notifications/ws?token={admin.token}") as websocket:
        websocket.receive_json()
        websocket.send_json({"type": "open"})
        snapshot = websocket.receive_json()

    assert snapshot["type"] == "snapshot"
    assert all(item["read"] for item in snapshot["data"])
