"""Use cases for the conversation attached to a ticket."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.application.use_cases.errors import EntityNotFoundError, PermissionDeniedError
from complaint_desk.domain.entities import Attachment, Comment, Ticket, UserProfile
from complaint_desk.infrastructure.repositories import CommentRepository

from .get_ticket import get_ticket


def list_comments(session: Session, *, viewer: UserProfile, ticket_id: str) -> Sequence[Comment]:
    get_ticket(session, viewer=viewer, ticket_id=ticket_id)
    return CommentRepository(session).list_for_ticket(ticket_id)


def add_comment(
    session: Session,
    *,
    author: UserProfile,
    ticket_id: str,
    text: str,
    attachments: Sequence[Attachment] = (),
) -> tuple[Ticket, Comment]:
    """Post a comment and return it together with its ticket."""

    ticket = get_ticket(session, viewer=author, ticket_id=ticket_id)
    if not text.strip() and not attachments:
        raise ValueError("A comment needs text or an attachment")

    comment = CommentRepository(session).create(
        Comment(
            id=None,
            ticket_id=ticket.id,
            text=text.strip(),
            author_id=author.id,
            author_name=author.name,
            attachments=list(attachments),
        )
    )
    return ticket, comment


def delete_comment(session: Session, *, actor: UserProfile, ticket_id: str, comment_id: str) -> None:
    """Delete a comment. Only its author or an admin may do so."""

    get_ticket(session, viewer=actor, ticket_id=ticket_id)
    repository = CommentRepository(session)
    comment = repository.get(ticket_id, comment_id)
    if comment is None:
        raise EntityNotFoundError("Comment not found")
    if comment.author_id != actor.id and not actor.is_admin():
        raise PermissionDeniedError("You can only delete your own comments")
    repository.delete(ticket_id, comment_id)
