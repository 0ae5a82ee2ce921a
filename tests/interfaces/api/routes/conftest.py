"""Fixtures for exercising the HTTP API against a throwaway SQLite database."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from complaint_desk.infrastructure.database import Base, engine, initialize_database
from complaint_desk.interfaces.api.dependencies import get_mail_transport, get_text_generator
from main import create_app
from notification_fakes import FakeTransport, StubTextGenerator


@dataclass
class Account:
    id: str
    org_id: str
    email: str
    password: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


@pytest.fixture(autouse=True)
def reset_database():
    """Start every test from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def mail_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def text_generator() -> StubTextGenerator:
    return StubTextGenerator()


@pytest.fixture
def client(mail_transport, text_generator):
    app = create_app()
    app.dependency_overrides[get_mail_transport] = lambda: mail_transport
    app.dependency_overrides[get_text_generator] = lambda: text_generator
    with TestClient(app) as test_client:
        yield test_client


def _login(client: TestClient, email: str, password: str) -> dict:
    response = client.post("/auth/token", data={"username": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def admin(client) -> Account:
    """Register an organization and return its administrator."""

    payload = {
        "org_name": "Acme",
        "admin_name": "Alex Admin",
        "email": "admin@acme.example.com",
        "password": "Secret123",
    }
    response = client.post("/auth/register-organization", json=payload)
    assert response.status_code == 201, response.text
    token = response.json()["access_token"]
    me = client.get("/users/me", headers={"Authorization": f"Bearer {token}"}).json()
    return Account(
        id=me["id"],
        org_id=me["org_id"],
        email=payload["email"],
        password=payload["password"],
        token=token,
    )


@pytest.fixture
def make_employee(client, admin):
    """Return a factory registering an employee, approved unless told otherwise."""

    def _make(email: str, *, name: str = "Riley Reporter", approve: bool = True) -> Account:
        password = "Secret123"
        response = client.post(
            "/auth/register",
            json={
                "org_id": admin.org_id,
                "name": name,
                "email": email,
                "password": password,
                "department": "General",
            },
        )
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]
        if approve:
            approved = client.post(f"/users/{user_id}/approve", headers=admin.headers)
            assert approved.status_code == 200, approved.text
        token = _login(client, email, password)["access_token"]
        return Account(
            id=user_id, org_id=admin.org_id, email=email, password=password, token=token
        )

    return _make


@pytest.fixture
def configure_smtp(client, admin):
    def _configure() -> None:
        response = client.patch(
            "/organizations/me",
            json={
                "smtp": {
                    "host": "smtp.acme.example.com",
                    "port": "587",
                    "user": "desk@acme.example.com",
                    "password": "smtp-secret",
                }
            },
            headers=admin.headers,
        )
        assert response.status_code == 200, response.text

    return _configure
