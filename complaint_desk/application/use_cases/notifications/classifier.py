"""Map notification events to in-app templates and preference keys."""

from __future__ import annotations

from dataclasses import dataclass

from complaint_desk.domain.entities import (
    IconKind,
    NewUserPending,
    NotificationEvent,
    PreferenceKey,
    TicketAssigned,
    TicketComment,
    TicketCreated,
    TicketResolved,
    UserApproved,
    UserProfileUpdated,
)

DASHBOARD_LINK = "/dashboard"
ADMIN_USERS_LINK = "/dashboard/admin/users"
SETTINGS_LINK = "/dashboard/settings"


@dataclass(frozen=True)
class NotificationTemplate:
    title: str
    description: str
    link: str
    icon: IconKind


def ticket_link(ticket_id: str) -> str:
    return f"/dashboard/tickets/{ticket_id}"


def classify(event: NotificationEvent) -> NotificationTemplate:
    """Return the in-app template describing ``event``.

    Raises ``TypeError`` for anything that is not a known event type.
    """

    if isinstance(event, TicketCreated):
        return NotificationTemplate(
            title=f'New Ticket: "{event.ticket_title}"',
            description="A new ticket has been created in your department.",
            link=ticket_link(event.ticket_id),
            icon=IconKind.ALERT,
        )
    if isinstance(event, TicketComment):
        return NotificationTemplate(
            title=f'New Comment on "{event.ticket_title}"',
            description=f"{event.commenter_name} added a new comment.",
            link=ticket_link(event.ticket_id),
            icon=IconKind.MESSAGE,
        )
    if isinstance(event, TicketResolved):
        return NotificationTemplate(
            title=f'Ticket Resolved: "{event.ticket_title}"',
            description="Your ticket has been marked as resolved.",
            link=ticket_link(event.ticket_id),
            icon=IconKind.CHECK,
        )
    if isinstance(event, UserApproved):
        return NotificationTemplate(
            title="Account Approved",
            description="Your account has been approved. Welcome aboard!",
            link=DASHBOARD_LINK,
            icon=IconKind.USER_PLUS,
        )
    if isinstance(event, NewUserPending):
        return NotificationTemplate(
            title="New User Pending Approval",
            description=f"{event.new_user_name} has registered and is awaiting approval.",
            link=ADMIN_USERS_LINK,
            icon=IconKind.USER_CHECK,
        )
    if isinstance(event, TicketAssigned):
        return NotificationTemplate(
            title=f'Ticket Assigned: "{event.ticket_title}"',
            description="A ticket has been assigned to your department.",
            link=ticket_link(event.ticket_id),
            icon=IconKind.ALERT,
        )
    if isinstance(event, UserProfileUpdated):
        return NotificationTemplate(
            title="Your Profile Was Updated",
            description="An administrator has updated your role or department.",
            link=SETTINGS_LINK,
            icon=IconKind.USER_CHECK,
        )
    raise TypeError(f"Unsupported notification event: {type(event).__name__}")


def preference_key_for(event: NotificationEvent) -> PreferenceKey:
    """Return the preference flag that governs email for ``event``."""

    if isinstance(event, NewUserPending):
        return PreferenceKey.USER_APPROVALS
    if isinstance(event, TicketComment):
        return PreferenceKey.NEW_COMMENTS
    if isinstance(
        event,
        (TicketCreated, TicketResolved, UserApproved, TicketAssigned, UserProfileUpdated),
    ):
        return PreferenceKey.TICKET_UPDATES
    raise TypeError(f"Unsupported notification event: {type(event).__name__}")


__all__ = [
    "ADMIN_USERS_LINK",
    "DASHBOARD_LINK",
    "NotificationTemplate",
    "SETTINGS_LINK",
    "classify",
    "preference_key_for",
    "ticket_link",
]
