"""Organization, department and category schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SmtpSettingsSchema(BaseModel):
    host: str | None = None
    port: str | None = None
    user: str | None = None
    password: str | None = None

    model_config = ConfigDict(from_attributes=True)


class OrganizationSummary(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class OrganizationRead(BaseModel):
    id: str
    name: str
    owner_id: str | None
    theme: str
    smtp_configured: bool
    smtp_host: str | None = None
    smtp_port: str | None = None
    smtp_user: str | None = None
    created_at: datetime | None


class OrganizationUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    theme: str | None = None
    smtp: SmtpSettingsSchema | None = None
    clear_smtp: bool = False

    model_config = ConfigDict(extra="forbid")


class DepartmentRead(BaseModel):
    id: str
    org_id: str
    name: str
    supervisor_id: str | None
    supervisor_name: str | None
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    supervisor_id: str | None = None


class DepartmentUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    supervisor_id: str | None = None

    model_config = ConfigDict(extra="forbid")


class CategoryRead(BaseModel):
    id: str
    org_id: str
    name: str
    description: str
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: str = ""


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    description: str | None = None

    model_config = ConfigDict(extra="forbid")
