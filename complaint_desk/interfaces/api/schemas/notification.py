"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from complaint_desk.domain.entities import IconKind


class NotificationRead(BaseModel):
    """Notification as read by clients, using the camelCase field names."""

    id: str
    user_id: str
    title: str
    description: str
    link: str
    icon_name: IconKind
    read: bool
    created_at: datetime | None

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )


class MarkAllReadResponse(BaseModel):
    updated: int


__all__ = ["MarkAllReadResponse", "NotificationRead"]
