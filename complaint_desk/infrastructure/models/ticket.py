"""SQLAlchemy models for tickets and their comments."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Text

from complaint_desk.infrastructure.database import Base
from complaint_desk.utils import new_id, storage_now


class TicketModel(Base):
    __tablename__ = "ticket"

    id = Column(String(32), primary_key=True, default=new_id)
    org_id = Column(String(32), ForeignKey("organization.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    priority = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, index=True)
    is_public = Column(Boolean, nullable=False, default=False)
    department = Column(String(120), nullable=False, index=True)
    category = Column(String(120), nullable=False)
    reported_by_id = Column(String(32), nullable=False, index=True)
    reported_by_name = Column(String(120), nullable=False)
    attachments = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    updated_at = Column(DateTime(), nullable=False, default=storage_now)


class CommentModel(Base):
    __tablename__ = "ticket_comment"

    id = Column(String(32), primary_key=True, default=new_id)
    ticket_id = Column(
        String(32), ForeignKey("ticket.id", ondelete="CASCADE"), nullable=False, index=True
    )
    text = Column(Text, nullable=False)
    author_id = Column(String(32), nullable=False)
    author_name = Column(String(120), nullable=False)
    attachments = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["CommentModel", "TicketModel"]
