"""SQLAlchemy models for in-app notifications and the email delivery log."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, String, Text

from complaint_desk.infrastructure.database import Base
from complaint_desk.utils import new_id, storage_now


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (Index("ix_notification_user_read", "user_id", "read"),)

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), ForeignKey("user_profile.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    link = Column(String(255), nullable=False)
    icon_name = Column(String(30), nullable=False)
    read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


class EmailLogModel(Base):
    """Append-only audit row for every outbound email attempt of a tenant."""

    __tablename__ = "email_log"

    id = Column(String(32), primary_key=True, default=new_id)
    org_id = Column(String(32), ForeignKey("organization.id"), nullable=False, index=True)
    to = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False)
    error = Column(Text, nullable=True)
    sent_at = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["EmailLogModel", "NotificationModel"]
