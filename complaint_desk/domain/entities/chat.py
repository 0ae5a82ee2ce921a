"""Domain entities for direct messages between users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .ticket import Attachment


@dataclass
class ChatMessage:
    id: str | None
    room_id: str
    sender_id: str
    text: str
    attachments: list[Attachment] = field(default_factory=list)
    timestamp: datetime | None = None


@dataclass
class ChatRoom:
    """Conversation between exactly two participants.

    The room identifier is derived from the sorted participant ids so both
    users always land in the same room.
    """

    id: str
    participant_ids: tuple[str, str]
    last_message_text: str | None = None
    last_message_sender_id: str | None = None
    last_message_at: datetime | None = None
    created_at: datetime | None = None

    @staticmethod
    def room_id_for(first_user_id: str, second_user_id: str) -> str:
        return "_".join(sorted((first_user_id, second_user_id)))


__all__ = ["ChatMessage", "ChatRoom"]
