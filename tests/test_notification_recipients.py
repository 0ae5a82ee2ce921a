"""Tests for who gets notified by each workflow."""

from __future__ import annotations

from dataclasses import replace

import pytest

from complaint_desk.application.use_cases.notifications import recipients
from complaint_desk.domain.entities import (
    Department,
    NewUserPending,
    Ticket,
    TicketAssigned,
    TicketComment,
    TicketCreated,
    TicketResolved,
    UserApproved,
    UserProfileUpdated,
)
from notification_fakes import ORG_ID, FakeDirectory, make_admin, make_profile


@pytest.fixture
def ticket() -> Ticket:
    return Ticket(
        id="t1",
        org_id=ORG_ID,
        title="Printer jammed",
        description="Paper everywhere",
        priority="Medium",
        status="Open",
        is_public=False,
        department="General",
        category="Hardware",
        reported_by_id="reporter",
        reported_by_name="Riley",
    )


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory(
        profiles=[make_admin("admin-1"), make_admin("admin-2"), make_profile("reporter")],
        departments=[
            Department(id="d1", org_id=ORG_ID, name="General", supervisor_id="admin-1"),
            Department(id="d2", org_id=ORG_ID, name="IT", supervisor_id="sup-it"),
            Department(id="d3", org_id=ORG_ID, name="Facilities", supervisor_id=None),
            Department(id="d4", org_id=ORG_ID, name="Self", supervisor_id="reporter"),
        ],
    )


@pytest.mark.anyio
async def test_ticket_created_notifies_department_supervisor(directory, ticket) -> None:
    events = await recipients.for_ticket_created(directory, ticket)

    assert events == [
        TicketCreated(
            recipient_user_id="admin-1", org_id=ORG_ID, ticket_id="t1", ticket_title="Printer jammed"
        )
    ]


@pytest.mark.anyio
async def test_ticket_created_without_supervisor_notifies_nobody(directory, ticket) -> None:
    events = await recipients.for_ticket_created(directory, replace(ticket, department="Facilities"))

    assert events == []


@pytest.mark.anyio
async def test_ticket_created_notifies_supervisor_even_when_they_reported_it(
    directory, ticket
) -> None:
    events = await recipients.for_ticket_created(directory, replace(ticket, department="Self"))

    assert [event.recipient_user_id for event in events] == ["reporter"]


def test_comment_by_reporter_notifies_nobody(ticket) -> None:
    assert recipients.for_ticket_comment(ticket, "reporter", "Riley") == []


def test_comment_by_someone_else_notifies_reporter(ticket) -> None:
    events = recipients.for_ticket_comment(ticket, "admin-1", "Alex")

    assert len(events) == 1
    assert isinstance(events[0], TicketComment)
    assert events[0].recipient_user_id == "reporter"
    assert events[0].commenter_name == "Alex"


@pytest.mark.anyio
async def test_resolution_notifies_reporter_once(directory, ticket) -> None:
    resolved = replace(ticket, status="Resolved")

    first = await recipients.for_ticket_updated(directory, ticket, resolved)
    again = await recipients.for_ticket_updated(directory, resolved, resolved)

    assert [type(event) for event in first] == [TicketResolved]
    assert first[0].recipient_user_id == "reporter"
    assert again == []


@pytest.mark.anyio
async def test_reassignment_notifies_new_supervisor(directory, ticket) -> None:
    events = await recipients.for_ticket_updated(directory, ticket, replace(ticket, department="IT"))

    assert [type(event) for event in events] == [TicketAssigned]
    assert events[0].recipient_user_id == "sup-it"


@pytest.mark.anyio
async def test_reassignment_skips_supervisor_who_reported(directory, ticket) -> None:
    events = await recipients.for_ticket_updated(
        directory, ticket, replace(ticket, department="Self")
    )

    assert events == []


@pytest.mark.anyio
async def test_registration_notifies_every_admin(directory) -> None:
    new_user = make_profile("newbie")

    events = await recipients.for_user_registered(directory, new_user)

    assert all(isinstance(event, NewUserPending) for event in events)
    assert sorted(event.recipient_user_id for event in events) == ["admin-1", "admin-2"]


def test_approval_and_profile_update_target_the_user() -> None:
    before = make_profile("u1")
    after = replace(before, department="IT")

    assert recipients.for_user_approved(after) == [UserApproved(recipient_user_id="u1", org_id=ORG_ID)]
    assert recipients.for_user_profile_updated(before, after) == [
        UserProfileUpdated(recipient_user_id="u1", org_id=ORG_ID)
    ]
    assert recipients.for_user_profile_updated(before, replace(before, phone="555")) == []
