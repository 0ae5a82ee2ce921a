"""Persistence helpers for tickets and comments."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Attachment, Comment, Ticket
from complaint_desk.infrastructure.models import CommentModel, TicketModel
from complaint_desk.utils import from_storage, storage_now, to_storage


def _dump_attachments(attachments: Sequence[Attachment]) -> list[dict[str, str]]:
    return [{"name": item.name, "url": item.url} for item in attachments]


def _load_attachments(raw: Any) -> list[Attachment]:
    if not isinstance(raw, list):
        return []
    loaded: list[Attachment] = []
    for item in raw:
        if isinstance(item, dict) and item.get("url"):
            loaded.append(Attachment(name=str(item.get("name") or ""), url=str(item["url"])))
    return loaded


class TicketRepository:
    """Provide CRUD operations for :class:`Ticket` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, ticket_id: str) -> Ticket | None:
        model = self.session.get(TicketModel, ticket_id)
        return self._to_entity(model) if model else None

    def list_for_org(self, org_id: str, *, limit: int | None = None) -> Sequence[Ticket]:
        query = self.session.query(TicketModel).filter(TicketModel.org_id == org_id)
        return self._ordered(query, limit)

    def list_for_reporter(self, user_id: str, *, limit: int | None = 10) -> Sequence[Ticket]:
        query = self.session.query(TicketModel).filter(TicketModel.reported_by_id == user_id)
        return self._ordered(query, limit)

    def list_public_for_department(
        self, org_id: str, department: str, *, limit: int | None = 10
    ) -> Sequence[Ticket]:
        query = self.session.query(TicketModel).filter(
            TicketModel.org_id == org_id,
            TicketModel.department == department,
            TicketModel.is_public.is_(True),
        )
        return self._ordered(query, limit)

    def list_for_department(self, org_id: str, department: str) -> Sequence[Ticket]:
        query = self.session.query(TicketModel).filter(
            TicketModel.org_id == org_id,
            TicketModel.department == department,
        )
        return self._ordered(query, None)

    def create(self, ticket: Ticket) -> Ticket:
        model = TicketModel()
        self._apply_entity_to_model(model, ticket)
        now = storage_now()
        model.created_at = now
        model.updated_at = now
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, ticket: Ticket) -> Ticket:
        model = self.session.get(TicketModel, ticket.id) if ticket.id else None
        if model is None:
            msg = f"Ticket with id {ticket.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, ticket)
        model.updated_at = storage_now()
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def _ordered(self, query, limit: int | None) -> Sequence[Ticket]:
        query = query.order_by(TicketModel.created_at.desc(), TicketModel.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _apply_entity_to_model(model: TicketModel, ticket: Ticket) -> None:
        model.org_id = ticket.org_id
        model.title = ticket.title
        model.description = ticket.description
        model.priority = ticket.priority
        model.status = ticket.status
        model.is_public = ticket.is_public
        model.department = ticket.department
        model.category = ticket.category
        model.reported_by_id = ticket.reported_by_id
        model.reported_by_name = ticket.reported_by_name
        model.attachments = _dump_attachments(ticket.attachments)

    @staticmethod
    def _to_entity(model: TicketModel) -> Ticket:
        return Ticket(
            id=model.id,
            org_id=model.org_id,
            title=model.title,
            description=model.description,
            priority=model.priority,
            status=model.status,
            is_public=bool(model.is_public),
            department=model.department,
            category=model.category,
            reported_by_id=model.reported_by_id,
            reported_by_name=model.reported_by_name,
            attachments=_load_attachments(model.attachments),
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
        )


class CommentRepository:
    """Provide persistence for ticket comments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_ticket(self, ticket_id: str) -> Sequence[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.ticket_id == ticket_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, ticket_id: str, comment_id: str) -> Comment | None:
        model = self._get_model(ticket_id, comment_id)
        return self._to_entity(model) if model else None

    def create(self, comment: Comment) -> Comment:
        model = CommentModel(
            ticket_id=comment.ticket_id,
            text=comment.text,
            author_id=comment.author_id,
            author_name=comment.author_name,
            attachments=_dump_attachments(comment.attachments),
        )
        if comment.created_at is not None:
            model.created_at = to_storage(comment.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, ticket_id: str, comment_id: str) -> None:
        model = self._get_model(ticket_id, comment_id)
        if model is None:
            msg = f"Comment with id {comment_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.commit()

    def _get_model(self, ticket_id: str, comment_id: str) -> CommentModel | None:
        return (
            self.session.query(CommentModel)
            .filter(CommentModel.ticket_id == ticket_id, CommentModel.id == comment_id)
            .first()
        )

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            ticket_id=model.ticket_id,
            text=model.text,
            author_id=model.author_id,
            author_name=model.author_name,
            attachments=_load_attachments(model.attachments),
            created_at=from_storage(model.created_at),
        )


__all__ = ["CommentRepository", "TicketRepository"]
