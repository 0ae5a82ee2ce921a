"""Persistence helpers for direct message rooms."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from complaint_desk.domain.entities import ChatMessage, ChatRoom
from complaint_desk.infrastructure.models import ChatMessageModel, ChatRoomModel
from complaint_desk.infrastructure.repositories.ticket_repository import (
    _dump_attachments,
    _load_attachments,
)
from complaint_desk.utils import from_storage, storage_now


class ChatRepository:
    """Store rooms and their messages."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_room(self, room_id: str) -> ChatRoom | None:
        model = self.session.get(ChatRoomModel, room_id)
        return self._room_to_entity(model) if model else None

    def create_room(self, room: ChatRoom) -> ChatRoom:
        first, second = room.participant_ids
        model = ChatRoomModel(
            id=room.id,
            first_participant_id=first,
            second_participant_id=second,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._room_to_entity(model)

    def list_rooms_for_user(self, user_id: str) -> Sequence[ChatRoom]:
        query = (
            self.session.query(ChatRoomModel)
            .filter(
                or_(
                    ChatRoomModel.first_participant_id == user_id,
                    ChatRoomModel.second_participant_id == user_id,
                )
            )
            .order_by(ChatRoomModel.last_message_at.desc(), ChatRoomModel.created_at.desc())
        )
        return [self._room_to_entity(model) for model in query.all()]

    def add_message(self, message: ChatMessage, *, preview: str) -> ChatMessage:
        """Persist ``message`` and refresh the room preview in one transaction."""

        room = self.session.get(ChatRoomModel, message.room_id)
        if room is None:
            msg = f"Chat room {message.room_id} not found"
            raise ValueError(msg)
        now = storage_now()
        model = ChatMessageModel(
            room_id=message.room_id,
            sender_id=message.sender_id,
            text=message.text,
            attachments=_dump_attachments(message.attachments),
            timestamp=now,
        )
        room.last_message_text = preview
        room.last_message_sender_id = message.sender_id
        room.last_message_at = now
        self.session.add_all([model, room])
        self.session.commit()
        self.session.refresh(model)
        return self._message_to_entity(model)

    def list_messages(self, room_id: str) -> Sequence[ChatMessage]:
        query = (
            self.session.query(ChatMessageModel)
            .filter(ChatMessageModel.room_id == room_id)
            .order_by(ChatMessageModel.timestamp.asc(), ChatMessageModel.id.asc())
        )
        return [self._message_to_entity(model) for model in query.all()]

    @staticmethod
    def _room_to_entity(model: ChatRoomModel) -> ChatRoom:
        return ChatRoom(
            id=model.id,
            participant_ids=(model.first_participant_id, model.second_participant_id),
            last_message_text=model.last_message_text,
            last_message_sender_id=model.last_message_sender_id,
            last_message_at=from_storage(model.last_message_at),
            created_at=from_storage(model.created_at),
        )

    @staticmethod
    def _message_to_entity(model: ChatMessageModel) -> ChatMessage:
        return ChatMessage(
            id=model.id,
            room_id=model.room_id,
            sender_id=model.sender_id,
            text=model.text or "",
            attachments=_load_attachments(model.attachments),
            timestamp=from_storage(model.timestamp),
        )


__all__ = ["ChatRepository"]
