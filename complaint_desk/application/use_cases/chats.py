"""Use cases for direct messages between members."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from complaint_desk.domain.entities import Attachment, ChatMessage, ChatRoom, UserProfile
from complaint_desk.infrastructure.repositories import ChatRepository, UserRepository

from .errors import EntityNotFoundError


def _require_room(session: Session, *, user: UserProfile, room_id: str) -> ChatRoom:
    room = ChatRepository(session).get_room(room_id)
    if room is None or user.id not in room.participant_ids:
        raise EntityNotFoundError("Chat room not found")
    return room


def get_or_create_chat_room(session: Session, *, user: UserProfile, other_user_id: str) -> ChatRoom:
    """Return the room shared by ``user`` and ``other_user_id``, creating it once."""

    if other_user_id == user.id:
        raise ValueError("You cannot start a conversation with yourself")
    other = UserRepository(session).get(other_user_id)
    if other is None or other.org_id != user.org_id:
        raise EntityNotFoundError("One or both user profiles not found.")

    repository = ChatRepository(session)
    room_id = ChatRoom.room_id_for(user.id, other.id)
    room = repository.get_room(room_id)
    if room is not None:
        return room
    participants = tuple(sorted((user.id, other.id)))
    return repository.create_room(ChatRoom(id=room_id, participant_ids=participants))


def list_chat_rooms(session: Session, *, user: UserProfile) -> Sequence[ChatRoom]:
    return ChatRepository(session).list_rooms_for_user(user.id)


def message_preview(text: str, attachments: Sequence[Attachment]) -> str:
    if attachments and not text:
        return f"{len(attachments)} attachment(s)"
    return text


def send_chat_message(
    session: Session,
    *,
    sender: UserProfile,
    room_id: str,
    text: str,
    attachments: Sequence[Attachment] = (),
) -> ChatMessage:
    _require_room(session, user=sender, room_id=room_id)
    text = text.strip()
    if not text and not attachments:
        raise ValueError("A message needs text or an attachment")
    message = ChatMessage(
        id=None,
        room_id=room_id,
        sender_id=sender.id,
        text=text,
        attachments=list(attachments),
    )
    return ChatRepository(session).add_message(message, preview=message_preview(text, attachments))


def list_chat_messages(session: Session, *, user: UserProfile, room_id: str) -> Sequence[ChatMessage]:
    _require_room(session, user=user, room_id=room_id)
    return ChatRepository(session).list_messages(room_id)


__all__ = [
    "get_or_create_chat_room",
    "list_chat_messages",
    "list_chat_rooms",
    "message_preview",
    "send_chat_message",
]
