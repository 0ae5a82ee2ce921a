"""Endpoints for tickets and their comments."""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.notifications import (
    NotificationDispatcher,
    notify_ticket_comment,
    notify_ticket_created,
    notify_ticket_updated,
)
from complaint_desk.application.use_cases.tickets import (
    add_comment,
    analyze_ticket,
    create_ticket,
    delete_comment,
    get_ticket,
    list_comments,
    list_tickets,
    update_ticket,
)
from complaint_desk.domain.entities import Attachment, UserProfile
from complaint_desk.infrastructure.database import get_db
from complaint_desk.infrastructure.openai_client import OpenAIServiceError, OpenAITicketAnalyzer
from complaint_desk.interfaces.api.dependencies import (
    get_current_active_user,
    get_dispatcher,
    get_ticket_analyzer,
)
from complaint_desk.interfaces.api.routes_helpers import USE_CASE_ERRORS, http_error_from
from complaint_desk.interfaces.api.schemas import (
    AttachmentSchema,
    CommentCreate,
    CommentRead,
    TicketAnalysisRead,
    TicketCreate,
    TicketRead,
    TicketUpdate,
)

router = APIRouter(prefix="/tickets", tags=["tickets"])
logger = logging.getLogger(__name__)


def _to_attachments(items: list[AttachmentSchema]) -> list[Attachment]:
    return [Attachment(name=item.name, url=item.url) for item in items]


@router.get("/", response_model=list[TicketRead])
def read_tickets(
    view: str | None = None,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    """List tickets visible to the user.

    ``view`` is one of ``organization``, ``department``, ``mine`` or
    ``department_public``; the default depends on the role of the user.
    """

    try:
        return list_tickets(db, viewer=current_user, view=view)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.post("/", response_model=TicketRead, status_code=status.HTTP_201_CREATED)
def create_ticket_endpoint(
    payload: TicketCreate,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    try:
        ticket = create_ticket(
            db,
            reporter=current_user,
            title=payload.title,
            description=payload.description,
            priority=payload.priority,
            department=payload.department,
            category=payload.category,
            is_public=payload.is_public,
            attachments=_to_attachments(payload.attachments),
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    background_tasks.add_task(notify_ticket_created, dispatcher, ticket=ticket)
    return ticket


@router.get("/{ticket_id}", response_model=TicketRead)
def read_ticket(
    ticket_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        return get_ticket(db, viewer=current_user, ticket_id=ticket_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.patch("/{ticket_id}", response_model=TicketRead)
def update_ticket_endpoint(
    ticket_id: str,
    payload: TicketUpdate,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    """Triage a ticket and notify about reassignment or resolution."""

    try:
        before, after = update_ticket(
            db,
            actor=current_user,
            ticket_id=ticket_id,
            status=payload.status,
            priority=payload.priority,
            department=payload.department,
            category=payload.category,
            is_public=payload.is_public,
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    background_tasks.add_task(notify_ticket_updated, dispatcher, before=before, after=after)
    return after


@router.get("/{ticket_id}/comments", response_model=list[CommentRead])
def read_comments(
    ticket_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
):
    try:
        return list_comments(db, viewer=current_user, ticket_id=ticket_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.post(
    "/{ticket_id}/comments", response_model=CommentRead, status_code=status.HTTP_201_CREATED
)
def create_comment(
    ticket_id: str,
    payload: CommentCreate,
    background_tasks: BackgroundTasks,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    try:
        ticket, comment = add_comment(
            db,
            author=current_user,
            ticket_id=ticket_id,
            text=payload.text,
            attachments=_to_attachments(payload.attachments),
        )
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc

    background_tasks.add_task(
        notify_ticket_comment,
        dispatcher,
        ticket=ticket,
        author_id=current_user.id,
        author_name=current_user.name,
    )
    return comment


@router.delete("/{ticket_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment_endpoint(
    ticket_id: str,
    comment_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
) -> None:
    try:
        delete_comment(db, actor=current_user, ticket_id=ticket_id, comment_id=comment_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc


@router.post("/{ticket_id}/analysis", response_model=TicketAnalysisRead)
async def analyze_ticket_endpoint(
    ticket_id: str,
    current_user: UserProfile = Depends(get_current_active_user),
    db: Session = Depends(get_db),
    analyzer: OpenAITicketAnalyzer = Depends(get_ticket_analyzer),
):
    """Summarize the ticket and draft a reply with the language model."""

    try:
        return await analyze_ticket(db, analyzer, viewer=current_user, ticket_id=ticket_id)
    except USE_CASE_ERRORS as exc:
        raise http_error_from(exc) from exc
    except OpenAIServiceError as exc:
        logger.warning("Ticket analysis failed for %s: %s", ticket_id, exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(exc),
        ) from exc
