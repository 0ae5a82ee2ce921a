"""Use case for AI assistance on a ticket."""

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Comment, TicketAnalysis, UserProfile
from complaint_desk.infrastructure.repositories import CommentRepository

from .get_ticket import get_ticket


class TicketAnalyzer(Protocol):
    async def analyze(
        self, title: str, description: str, comments: Sequence[Comment]
    ) -> TicketAnalysis: ...


async def analyze_ticket(
    session: Session,
    analyzer: TicketAnalyzer,
    *,
    viewer: UserProfile,
    ticket_id: str,
) -> TicketAnalysis:
    """Summarize a ticket, analyze its root cause and draft a reply."""

    ticket = get_ticket(session, viewer=viewer, ticket_id=ticket_id)
    comments = CommentRepository(session).list_for_ticket(ticket.id)
    return await analyzer.analyze(ticket.title, ticket.description, comments)
