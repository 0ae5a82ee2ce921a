"""Pydantic schemas for the HTTP interface."""

from .auth import EmployeeRegistration, OrganizationRegistration, Token
from .chat import ChatMessageCreate, ChatMessageRead, ChatRoomCreate, ChatRoomRead
from .mailer import (
    CustomEmailRequest,
    CustomEmailResponse,
    DeliveryAttemptRead,
    TestEmailRequest,
    TestEmailResponse,
)
from .notification import MarkAllReadResponse, NotificationRead
from .organization import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    DepartmentCreate,
    DepartmentRead,
    DepartmentUpdate,
    OrganizationRead,
    OrganizationSummary,
    OrganizationUpdate,
    SmtpSettingsSchema,
)
from .ticket import (
    AttachmentSchema,
    CommentCreate,
    CommentRead,
    TicketAnalysisRead,
    TicketCreate,
    TicketRead,
    TicketUpdate,
)
from .user import (
    NotificationPreferencesSchema,
    PasswordChange,
    ProfileUpdate,
    UserRead,
    UserStatusUpdate,
    UserUpdate,
)

__all__ = [
    "AttachmentSchema",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "ChatMessageCreate",
    "ChatMessageRead",
    "ChatRoomCreate",
    "ChatRoomRead",
    "CommentCreate",
    "CommentRead",
    "CustomEmailRequest",
    "CustomEmailResponse",
    "DeliveryAttemptRead",
    "DepartmentCreate",
    "DepartmentRead",
    "DepartmentUpdate",
    "EmployeeRegistration",
    "MarkAllReadResponse",
    "NotificationPreferencesSchema",
    "NotificationRead",
    "OrganizationRead",
    "OrganizationRegistration",
    "OrganizationSummary",
    "OrganizationUpdate",
    "PasswordChange",
    "ProfileUpdate",
    "SmtpSettingsSchema",
    "TestEmailRequest",
    "TestEmailResponse",
    "TicketAnalysisRead",
    "TicketCreate",
    "TicketRead",
    "TicketUpdate",
    "Token",
    "UserRead",
    "UserStatusUpdate",
    "UserUpdate",
]
