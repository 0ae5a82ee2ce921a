"""SQLAlchemy model for the user profile table."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String

from complaint_desk.infrastructure.database import Base
from complaint_desk.utils import new_id, storage_now


class UserModel(Base):
    """Database representation of a member of an organization."""

    __tablename__ = "user_profile"

    id = Column(String(32), primary_key=True, default=new_id)
    org_id = Column(String(32), ForeignKey("organization.id"), nullable=False, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    name = Column(String(120), nullable=False)
    password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)
    status = Column(String(20), nullable=False)
    department = Column(String(120), nullable=True)
    phone = Column(String(40), nullable=True)
    pref_ticket_updates = Column(Boolean, nullable=True)
    pref_new_comments = Column(Boolean, nullable=True)
    pref_user_approvals = Column(Boolean, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)
    last_seen = Column(DateTime(), nullable=True)


__all__ = ["UserModel"]
