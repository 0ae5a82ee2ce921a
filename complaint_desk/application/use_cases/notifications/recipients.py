"""Decide which users a workflow must notify.

Each policy returns the events to dispatch, one per recipient. An empty list
means nobody is notified, which is never an error.
"""

from __future__ import annotations

from complaint_desk.domain.entities import (
    ROLE_ADMIN,
    NewUserPending,
    NotificationEvent,
    Ticket,
    TicketAssigned,
    TicketComment,
    TicketCreated,
    TicketResolved,
    UserApproved,
    UserProfile,
    UserProfileUpdated,
)

from .ports import Directory


async def for_ticket_created(directory: Directory, ticket: Ticket) -> list[NotificationEvent]:
    """Notify the supervisor of the department the ticket was filed in."""

    if not ticket.department:
        return []
    department = await directory.find_department_by_name(ticket.org_id, ticket.department)
    if department is None or not department.supervisor_id:
        return []
    return [
        TicketCreated(
            recipient_user_id=department.supervisor_id,
            org_id=ticket.org_id,
            ticket_id=ticket.id,
            ticket_title=ticket.title,
        )
    ]


def for_ticket_comment(ticket: Ticket, author_id: str, author_name: str) -> list[NotificationEvent]:
    """Notify the reporter, unless they wrote the comment themselves."""

    if author_id == ticket.reported_by_id:
        return []
    return [
        TicketComment(
            recipient_user_id=ticket.reported_by_id,
            org_id=ticket.org_id,
            ticket_id=ticket.id,
            ticket_title=ticket.title,
            commenter_name=author_name,
        )
    ]


async def for_ticket_updated(
    directory: Directory, before: Ticket, after: Ticket
) -> list[NotificationEvent]:
    """Diff two versions of a ticket and return reassignment and resolution events."""

    events: list[NotificationEvent] = []

    if after.department and after.department != before.department:
        department = await directory.find_department_by_name(before.org_id, after.department)
        if (
            department is not None
            and department.supervisor_id
            and department.supervisor_id != before.reported_by_id
        ):
            events.append(
                TicketAssigned(
                    recipient_user_id=department.supervisor_id,
                    org_id=before.org_id,
                    ticket_id=before.id,
                    ticket_title=before.title,
                )
            )

    if after.is_resolved() and not before.is_resolved():
        events.append(
            TicketResolved(
                recipient_user_id=before.reported_by_id,
                org_id=before.org_id,
                ticket_id=before.id,
                ticket_title=before.title,
            )
        )

    return events


async def for_user_registered(directory: Directory, new_user: UserProfile) -> list[NotificationEvent]:
    """Notify every admin of the organization about a pending registration."""

    admins = await directory.list_users(new_user.org_id, role=ROLE_ADMIN)
    return [
        NewUserPending(
            recipient_user_id=admin.id,
            org_id=new_user.org_id,
            new_user_name=new_user.name,
        )
        for admin in admins
        if admin.id and admin.id != new_user.id
    ]


def for_user_approved(user: UserProfile) -> list[NotificationEvent]:
    return [UserApproved(recipient_user_id=user.id, org_id=user.org_id)]


def for_user_profile_updated(before: UserProfile, after: UserProfile) -> list[NotificationEvent]:
    """Notify the user when an administrator changed their role or department."""

    if before.role == after.role and before.department == after.department:
        return []
    return [UserProfileUpdated(recipient_user_id=after.id, org_id=after.org_id)]


__all__ = [
    "for_ticket_comment",
    "for_ticket_created",
    "for_ticket_updated",
    "for_user_approved",
    "for_user_profile_updated",
    "for_user_registered",
]
