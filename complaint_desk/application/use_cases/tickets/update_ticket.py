"""Use case for triaging a ticket."""

from dataclasses import replace

from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.errors import PermissionDeniedError
from complaint_desk.domain.entities import (
    TICKET_PRIORITIES,
    TICKET_STATUSES,
    Ticket,
    UserProfile,
)
from complaint_desk.infrastructure.repositories import DepartmentRepository, TicketRepository

from .get_ticket import get_ticket


def update_ticket(
    session: Session,
    *,
    actor: UserProfile,
    ticket_id: str,
    status: str | None = None,
    priority: str | None = None,
    department: str | None = None,
    category: str | None = None,
    is_public: bool | None = None,
) -> tuple[Ticket, Ticket]:
    """Apply the changes and return the ticket before and after them.

    Only admins and supervisors triage tickets.
    """

    current = get_ticket(session, viewer=actor, ticket_id=ticket_id)
    if not (actor.is_admin() or actor.is_supervisor()):
        raise PermissionDeniedError("Only administrators and supervisors can update tickets")

    if status is not None and status not in TICKET_STATUSES:
        raise ValueError("Unknown status")
    if priority is not None and priority not in TICKET_PRIORITIES:
        raise ValueError("Unknown priority")
    if department is not None and department != current.department:
        if DepartmentRepository(session).get_by_name(current.org_id, department) is None:
            raise ValueError("Unknown department")

    updated = replace(
        current,
        status=status if status is not None else current.status,
        priority=priority if priority is not None else current.priority,
        department=department if department is not None else current.department,
        category=category if category is not None else current.category,
        is_public=is_public if is_public is not None else current.is_public,
    )
    return current, TicketRepository(session).update(updated)
