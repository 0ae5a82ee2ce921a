"""Tests for the SQLAlchemy notification adapters."""

from __future__ import annotations

import asyncio

import pytest

from complaint_desk.application.use_cases.organizations import register_organization
from complaint_desk.domain.entities import DeliveryAttempt, DeliveryStatus, IconKind, NotificationRecord
from complaint_desk.infrastructure.database import Base, SessionLocal, engine, initialize_database
from complaint_desk.infrastructure.notifications import (
    NotificationChangeBroker,
    SqlAlchemyDeliveryLog,
    SqlAlchemyDirectory,
    SqlAlchemyNotificationStore,
)


@pytest.fixture
def admin():
    Base.metadata.drop_all(bind=engine)
    initialize_database()
    with SessionLocal() as session:
        _, admin = register_organization(
            session,
            org_name="Acme",
            admin_name="Alex Admin",
            email="admin@acme.example.com",
            password="Secret123",
        )
    yield admin
    Base.metadata.drop_all(bind=engine)


def _record(user_id: str, title: str) -> NotificationRecord:
    return NotificationRecord(
        id=None,
        user_id=user_id,
        title=title,
        description="Something happened",
        link="/dashboard",
        icon_name=IconKind.BELL,
    )


@pytest.mark.anyio
async def test_store_round_trip_and_signals(admin) -> None:
    broker = NotificationChangeBroker()
    store = SqlAlchemyNotificationStore(SessionLocal, broker)
    queue = broker.listen(admin.id)

    first = await store.append(_record(admin.id, "first"))
    await asyncio.sleep(0.01)
    second = await store.append(_record(admin.id, "second"))
    await asyncio.sleep(0)

    records = await store.list_for_user(admin.id)
    assert [record.id for record in records] == [second.id, first.id]
    assert records[0].icon_name is IconKind.BELL
    assert records[0].created_at is not None
    assert queue.qsize() == 2


@pytest.mark.anyio
async def test_mark_all_read_is_atomic_and_idempotent(admin) -> None:
    broker = NotificationChangeBroker()
    store = SqlAlchemyNotificationStore(SessionLocal, broker)
    await store.append(_record(admin.id, "first"))
    await store.append(_record(admin.id, "second"))
    queue = broker.listen(admin.id)

    assert await store.mark_all_read(admin.id) == 2
    assert await store.mark_all_read(admin.id) == 0
    await asyncio.sleep(0)

    assert queue.qsize() == 1
    assert all(record.read for record in await store.list_for_user(admin.id))


@pytest.mark.anyio
async def test_mark_read_checks_ownership(admin) -> None:
    store = SqlAlchemyNotificationStore(SessionLocal, NotificationChangeBroker())
    record = await store.append(_record(admin.id, "first"))

    assert await store.mark_read("someone-else", record.id) is False
    assert await store.mark_read(admin.id, record.id) is True


@pytest.mark.anyio
async def test_directory_lookups(admin) -> None:
    directory = SqlAlchemyDirectory(SessionLocal)

    profile = await directory.get_profile(admin.id)
    organization = await directory.get_organization(admin.org_id)
    department = await directory.find_department_by_name(admin.org_id, "General")
    admins = await directory.list_users(admin.org_id, role="admin")

    assert profile.email == "admin@acme.example.com"
    assert organization.owner_id == admin.id
    assert department.supervisor_id == admin.id
    assert [user.id for user in admins] == [admin.id]
    assert await directory.get_profile("missing") is None


@pytest.mark.anyio
async def test_delivery_log_stamps_the_organization(admin) -> None:
    log = SqlAlchemyDeliveryLog(SessionLocal)
    attempt = DeliveryAttempt(
        id=None,
        org_id="",
        to="user@example.com",
        subject="Hello",
        status=DeliveryStatus.FAILURE,
        error="SMTP settings not configured",
    )

    await log.append(admin.org_id, attempt)
    entries = await log.list_for_org(admin.org_id)

    assert len(entries) == 1
    assert entries[0].org_id == admin.org_id
    assert entries[0].status is DeliveryStatus.FAILURE
