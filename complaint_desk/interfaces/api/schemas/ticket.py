"""Ticket and comment schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AttachmentSchema(BaseModel):
    name: str
    url: str

    model_config = ConfigDict(from_attributes=True)


class TicketCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    priority: str = "Medium"
    department: str
    category: str = ""
    is_public: bool = False
    attachments: list[AttachmentSchema] = Field(default_factory=list)


class TicketUpdate(BaseModel):
    status: str | None = None
    priority: str | None = None
    department: str | None = None
    category: str | None = None
    is_public: bool | None = None

    model_config = ConfigDict(extra="forbid")


class TicketRead(BaseModel):
    id: str
    org_id: str
    title: str
    description: str
    priority: str
    status: str
    is_public: bool
    department: str
    category: str
    reported_by_id: str
    reported_by_name: str
    attachments: list[AttachmentSchema]
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    text: str = ""
    attachments: list[AttachmentSchema] = Field(default_factory=list)


class CommentRead(BaseModel):
    id: str
    ticket_id: str
    text: str
    author_id: str
    author_name: str
    attachments: list[AttachmentSchema]
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class TicketAnalysisRead(BaseModel):
    summary: str
    analysis: str
    suggested_reply: str

    model_config = ConfigDict(from_attributes=True)
