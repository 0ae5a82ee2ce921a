"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NotificationPreferencesSchema(BaseModel):
    ticket_updates: bool | None = None
    new_comments: bool | None = None
    user_approvals: bool | None = None

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: str
    org_id: str
    email: EmailStr
    name: str
    role: str
    status: str
    department: str | None
    phone: str | None
    notification_preferences: NotificationPreferencesSchema
    created_at: datetime | None
    last_seen: datetime | None
    online: bool = False

    model_config = ConfigDict(from_attributes=True)


class UserUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    phone: str | None = Field(default=None, max_length=40)
    role: str | None = None
    department: str | None = None

    model_config = ConfigDict(extra="forbid")


class ProfileUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    phone: str | None = Field(default=None, max_length=40)

    model_config = ConfigDict(extra="forbid")


class UserStatusUpdate(BaseModel):
    status: str


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=6)
