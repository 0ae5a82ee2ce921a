"""Outbound email schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from complaint_desk.domain.entities import DeliveryStatus


class CustomEmailRequest(BaseModel):
    recipient_ids: list[str] = Field(..., min_length=1)
    subject: str = Field(..., min_length=1, max_length=255)
    body: str


class CustomEmailResponse(BaseModel):
    sent: list[str]
    skipped: list[str]
    failed: list[str]

    model_config = ConfigDict(from_attributes=True)


class TestEmailRequest(BaseModel):
    recipient_email: EmailStr


class TestEmailResponse(BaseModel):
    sent: bool
    message: str


class DeliveryAttemptRead(BaseModel):
    id: str
    to: str
    subject: str
    status: DeliveryStatus
    error: str | None
    sent_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
