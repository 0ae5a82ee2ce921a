"""Tests for the mapping of notification events to templates."""

from __future__ import annotations

import pytest

from complaint_desk.application.use_cases.notifications import classify, preference_key_for
from complaint_desk.domain.entities import (
    EVENT_TYPES,
    IconKind,
    NewUserPending,
    PreferenceKey,
    TicketAssigned,
    TicketComment,
    TicketCreated,
    TicketResolved,
    UserApproved,
    UserProfileUpdated,
)

ALL_EVENTS = [
    NewUserPending(recipient_user_id="u1", org_id="o1", new_user_name="Dana"),
    TicketCreated(recipient_user_id="u1", org_id="o1", ticket_id="t1", ticket_title="Broken AC"),
    TicketComment(
        recipient_user_id="u1",
        org_id="o1",
        ticket_id="t1",
        ticket_title="Broken AC",
        commenter_name="Sam",
    ),
    TicketResolved(recipient_user_id="u1", org_id="o1", ticket_id="t1", ticket_title="Broken AC"),
    UserApproved(recipient_user_id="u1", org_id="o1"),
    TicketAssigned(recipient_user_id="u1", org_id="o1", ticket_id="t1", ticket_title="Broken AC"),
    UserProfileUpdated(recipient_user_id="u1", org_id="o1"),
]


def test_every_event_type_is_covered() -> None:
    assert {type(event) for event in ALL_EVENTS} == set(EVENT_TYPES)


@pytest.mark.parametrize("event", ALL_EVENTS, ids=lambda event: event.kind)
def test_classify_returns_complete_template(event) -> None:
    template = classify(event)

    assert template.title
    assert template.description
    assert template.link.startswith("/dashboard")
    assert isinstance(template.icon, IconKind)


def test_ticket_templates_link_to_the_ticket() -> None:
    template = classify(ALL_EVENTS[3])

    assert template.title == 'Ticket Resolved: "Broken AC"'
    assert template.link == "/dashboard/tickets/t1"
    assert template.icon is IconKind.CHECK


def test_comment_template_names_the_commenter() -> None:
    template = classify(ALL_EVENTS[2])

    assert template.title == 'New Comment on "Broken AC"'
    assert template.description == "Sam added a new comment."


def test_new_user_template_points_to_user_management() -> None:
    template = classify(ALL_EVENTS[0])

    assert template.link == "/dashboard/admin/users"
    assert "Dana" in template.description


@pytest.mark.parametrize(
    ("event", "expected"),
    [
        (ALL_EVENTS[0], PreferenceKey.USER_APPROVALS),
        (ALL_EVENTS[1], PreferenceKey.TICKET_UPDATES),
        (ALL_EVENTS[2], PreferenceKey.NEW_COMMENTS),
        (ALL_EVENTS[3], PreferenceKey.TICKET_UPDATES),
        (ALL_EVENTS[4], PreferenceKey.TICKET_UPDATES),
        (ALL_EVENTS[5], PreferenceKey.TICKET_UPDATES),
        (ALL_EVENTS[6], PreferenceKey.TICKET_UPDATES),
    ],
    ids=lambda value: getattr(value, "kind", str(value)),
)
def test_preference_key_for_each_event(event, expected) -> None:
    assert preference_key_for(event) is expected


def test_unknown_events_are_rejected() -> None:
    with pytest.raises(TypeError):
        classify(object())
    with pytest.raises(TypeError):
        preference_key_for(object())
