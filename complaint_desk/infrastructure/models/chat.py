"""SQLAlchemy models for direct messages."""

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text

from complaint_desk.infrastructure.database import Base
from complaint_desk.utils import new_id, storage_now


class ChatRoomModel(Base):
    __tablename__ = "chat_room"

    id = Column(String(70), primary_key=True)
    first_participant_id = Column(String(32), nullable=False, index=True)
    second_participant_id = Column(String(32), nullable=False, index=True)
    last_message_text = Column(Text, nullable=True)
    last_message_sender_id = Column(String(32), nullable=True)
    last_message_at = Column(DateTime(), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=storage_now)


class ChatMessageModel(Base):
    __tablename__ = "chat_message"

    id = Column(String(32), primary_key=True, default=new_id)
    room_id = Column(String(70), ForeignKey("chat_room.id"), nullable=False, index=True)
    sender_id = Column(String(32), nullable=False)
    text = Column(Text, nullable=False, default="")
    attachments = Column(JSON, nullable=False, default=list)
    timestamp = Column(DateTime(), nullable=False, default=storage_now)


__all__ = ["ChatMessageModel", "ChatRoomModel"]
