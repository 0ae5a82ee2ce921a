"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field


class Token(BaseModel):
    access_token: str
    token_type: str
    role: str
    status: str


class OrganizationRegistration(BaseModel):
    org_name: str = Field(..., min_length=1, max_length=120)
    admin_name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=6)


class EmployeeRegistration(BaseModel):
    org_id: str
    name: str = Field(..., min_length=1, max_length=120)
    email: EmailStr
    password: str = Field(..., min_length=6)
    department: str = Field(..., min_length=1)
    phone: str | None = Field(default=None, max_length=40)
