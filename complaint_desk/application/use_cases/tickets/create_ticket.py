"""Use case for filing a ticket."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import (
    TICKET_PRIORITIES,
    TICKET_STATUS_OPEN,
    Attachment,
    Ticket,
    UserProfile,
)
from complaint_desk.infrastructure.repositories import DepartmentRepository, TicketRepository


def create_ticket(
    session: Session,
    *,
    reporter: UserProfile,
    title: str,
    description: str,
    priority: str,
    department: str,
    category: str,
    is_public: bool = False,
    attachments: Sequence[Attachment] = (),
) -> Ticket:
    """Create an ``Open`` ticket reported by ``reporter``."""

    title = title.strip()
    if not title:
        raise ValueError("The title is required")
    if priority not in TICKET_PRIORITIES:
        raise ValueError("Unknown priority")
    if not department:
        raise ValueError("User organization or department is not defined.")
    if DepartmentRepository(session).get_by_name(reporter.org_id, department) is None:
        raise ValueError("Unknown department")

    ticket = Ticket(
        id=None,
        org_id=reporter.org_id,
        title=title,
        description=description,
        priority=priority,
        status=TICKET_STATUS_OPEN,
        is_public=is_public,
        department=department,
        category=category,
        reported_by_id=reporter.id,
        reported_by_name=reporter.name,
        attachments=list(attachments),
    )
    return TicketRepository(session).create(ticket)
