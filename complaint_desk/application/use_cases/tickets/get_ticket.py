"""Use cases for reading tickets."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.errors import EntityNotFoundError, PermissionDeniedError
from complaint_desk.domain.entities import Ticket, UserProfile
from complaint_desk.infrastructure.repositories import TicketRepository

VIEW_ORGANIZATION = "organization"
VIEW_DEPARTMENT = "department"
VIEW_MINE = "mine"
VIEW_DEPARTMENT_PUBLIC = "department_public"
VIEWS: tuple[str, ...] = (VIEW_ORGANIZATION, VIEW_DEPARTMENT, VIEW_MINE, VIEW_DEPARTMENT_PUBLIC)


def can_view_ticket(viewer: UserProfile, ticket: Ticket) -> bool:
    if viewer.org_id != ticket.org_id:
        return False
    if viewer.is_admin() or ticket.reported_by_id == viewer.id:
        return True
    if ticket.department == viewer.department:
        return viewer.is_supervisor() or ticket.is_public
    return False


def get_ticket(session: Session, *, viewer: UserProfile, ticket_id: str) -> Ticket:
    ticket = TicketRepository(session).get(ticket_id)
    if ticket is None or not can_view_ticket(viewer, ticket):
        raise EntityNotFoundError("Ticket not found")
    return ticket


def list_tickets(
    session: Session,
    *,
    viewer: UserProfile,
    view: str | None = None,
) -> Sequence[Ticket]:
    """Return the tickets of ``view`` newest first.

    Without an explicit view admins see the whole organization, supervisors
    their department and employees their own tickets.
    """

    if view is None:
        if viewer.is_admin():
            view = VIEW_ORGANIZATION
        elif viewer.is_supervisor():
            view = VIEW_DEPARTMENT
        else:
            view = VIEW_MINE
    if view not in VIEWS:
        raise ValueError("Unknown ticket view")

    repository = TicketRepository(session)
    if view == VIEW_MINE:
        return repository.list_for_reporter(viewer.id, limit=None)
    if view == VIEW_DEPARTMENT_PUBLIC:
        return repository.list_public_for_department(viewer.org_id, viewer.department or "")
    if view == VIEW_DEPARTMENT:
        if not (viewer.is_admin() or viewer.is_supervisor()):
            raise PermissionDeniedError("Only supervisors can list department tickets")
        return repository.list_for_department(viewer.org_id, viewer.department or "")
    if not viewer.is_admin():
        raise PermissionDeniedError("Only administrators can list every ticket")
    return repository.list_for_org(viewer.org_id)
