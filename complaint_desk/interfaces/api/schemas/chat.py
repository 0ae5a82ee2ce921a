"""Direct message schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .ticket import AttachmentSchema


class ChatRoomCreate(BaseModel):
    user_id: str


class ChatRoomRead(BaseModel):
    id: str
    participant_ids: list[str]
    last_message_text: str | None
    last_message_sender_id: str | None
    last_message_at: datetime | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class ChatMessageCreate(BaseModel):
    text: str = ""
    attachments: list[AttachmentSchema] = Field(default_factory=list)


class ChatMessageRead(BaseModel):
    id: str
    room_id: str
    sender_id: str
    text: str
    attachments: list[AttachmentSchema]
    timestamp: datetime | None

    model_config = ConfigDict(from_attributes=True)
